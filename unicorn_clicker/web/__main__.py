"""Entry point for the web version: python -m unicorn_clicker.web"""

import argparse
import logging

from unicorn_clicker.web.server import run_server


def main() -> None:
    parser = argparse.ArgumentParser(description="Unicorn Clicker — Web Version")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=5000, help="Port (default: 5000)")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"\n  🦄 Unicorn Clicker (Web Edition)")
    print(f"  ➜ http://{args.host}:{args.port}/\n")

    run_server(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
