"""Allow ``python -m lcrparams``."""

import sys

from lcrparams.cli import main

if __name__ == "__main__":
    sys.exit(main())
