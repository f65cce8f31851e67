"""Protobuf messages of the RBLN daemon service.

The daemon exposes ``rblnservices.RBLNServices``. Only the two discovery
RPCs are described here; message classes are built at import time from a
FileDescriptorProto, so no generated ``_pb2`` module is needed.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PROTO_PACKAGE = "rblnservices"
SERVICE_NAME = f"{PROTO_PACKAGE}.RBLNServices"

GET_SERVICEABLE_DEVICE_LIST = f"/{SERVICE_NAME}/GetServiceableDeviceList"
GET_VERSION = f"/{SERVICE_NAME}/GetVersion"

_FieldProto = descriptor_pb2.FieldDescriptorProto


def _add_message(file_proto, name, string_fields=()):
    message = file_proto.message_type.add()
    message.name = name
    for number, field_name in enumerate(string_fields, start=1):
        field = message.field.add()
        field.name = field_name
        field.number = number
        field.type = _FieldProto.TYPE_STRING
        field.label = _FieldProto.LABEL_OPTIONAL


def _add_method(service, name, input_type, output_type, server_streaming=False):
    method = service.method.add()
    method.name = name
    method.input_type = f".{PROTO_PACKAGE}.{input_type}"
    method.output_type = f".{PROTO_PACKAGE}.{output_type}"
    method.server_streaming = server_streaming


def _build_file_proto() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = "rblnservices/discovery.proto"
    file_proto.package = PROTO_PACKAGE
    file_proto.syntax = "proto3"

    _add_message(file_proto, "Empty")
    _add_message(file_proto, "Device", ["dev_id"])
    _add_message(file_proto, "VersionInfo", ["drv_version"])

    service = file_proto.service.add()
    service.name = "RBLNServices"
    _add_method(service, "GetServiceableDeviceList", "Empty", "Device", server_streaming=True)
    _add_method(service, "GetVersion", "Device", "VersionInfo")
    return file_proto


_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(_build_file_proto().SerializeToString())

Empty = message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{PROTO_PACKAGE}.Empty"))
Device = message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{PROTO_PACKAGE}.Device"))
VersionInfo = message_factory.GetMessageClass(
    _POOL.FindMessageTypeByName(f"{PROTO_PACKAGE}.VersionInfo")
)
