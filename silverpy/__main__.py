import sys

from silverpy.cli import main

sys.exit(main())
