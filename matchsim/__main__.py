"""Allow ``python -m matchsim``."""

import sys

from matchsim.cli import main

if __name__ == "__main__":
    sys.exit(main())
