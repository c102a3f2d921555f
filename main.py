"""Entry point for playing Tank City."""

import argparse
import logging
from pathlib import Path

from tankcity import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Tank City arcade defence")
    parser.add_argument(
        "--level",
        type=Path,
        default=None,
        help="JSON level file to load (and save to with F5)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    run_pygame(level_path=args.level, debug=args.debug)


if __name__ == "__main__":
    main()
