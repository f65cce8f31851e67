"""Setup configuration for rbln-npu-feature-discovery package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = (
    readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""
)

setup(
    name="rbln-npu-feature-discovery",
    version="0.1.0",
    description="Publish RBLN NPU hardware and driver labels for Kubernetes node-feature-discovery",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["rbln_feature_discovery", "rbln_feature_discovery.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Hardware",
        "Topic :: System :: Clustering",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "grpcio>=1.50.0",
        "protobuf>=4.25.0",
        "pyyaml>=5.3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.12.0",
            "pytest-mock>=3.6.0",
            "black>=21.0",
            "flake8>=3.9",
            "isort>=5.0",
        ],
        "test": [
            "pytest>=6.0",
            "pytest-cov>=2.12.0",
            "pytest-mock>=3.6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rbln-npu-feature-discovery=rbln_feature_discovery.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
