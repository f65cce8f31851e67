import sys

from rbln_feature_discovery.cli import main

sys.exit(main())
