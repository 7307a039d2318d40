import sys

from prop_dnf.cli import main

sys.exit(main())
