"""
rooMaestro main entry point.

Running the package with no arguments generates the project .roomodes file
for the built-in mode set.
"""

import sys
from typing import NoReturn

from rooMaestro.main_cli import cli_main


def main() -> NoReturn:
    """Run the CLI and exit with its status code."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
