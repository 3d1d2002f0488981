"""Entry point for Unicorn Clicker (terminal version)."""

import argparse
import logging

from unicorn_clicker.app import UnicornClickerApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Unicorn Clicker — terminal version")
    parser.add_argument("--log-file", help="Write logs to this file (the terminal is used by the UI)")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=args.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    app = UnicornClickerApp()
    app.run()


if __name__ == "__main__":
    main()
