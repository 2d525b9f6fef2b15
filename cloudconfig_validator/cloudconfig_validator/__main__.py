"""Module entrypoint for `python -m cloudconfig_validator`.

Delegates to the validator CLI implementation.
"""

import sys

from .run_validate import main


if __name__ == "__main__":
    sys.exit(main())
