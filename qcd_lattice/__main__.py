import sys

from qcd_lattice.cli import main

sys.exit(main())
