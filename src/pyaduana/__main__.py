import sys

from pyaduana.cli import main

sys.exit(main())
