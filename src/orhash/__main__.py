import sys

from orhash.cli import main

sys.exit(main())
