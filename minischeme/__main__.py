import sys

from minischeme.cli import main

sys.exit(main())
