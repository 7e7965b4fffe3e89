from __future__ import annotations

"""
Main Entry Point.

Runs the command-line tool and turns unexpected crashes into a logged
critical record plus a non-zero exit code.
"""

import logging
import sys
from typing import List, Optional

from path_to_unicode_filename.interface.cli.app import main as cli_main


def main(argv: Optional[List[str]] = None) -> int:
    try:
        return cli_main(argv)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logging.getLogger("path_to_unicode_filename.supervisor").critical(
            f"FATAL EXCEPTION DETECTED: {e}", exc_info=True
        )
        print(f"CRITICAL ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
