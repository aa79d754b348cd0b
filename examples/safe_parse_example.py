#!/usr/bin/env python3
"""
Example using the Result-returning API instead of exceptions.
"""

import sys

from result import Err, Ok

from simple_argparser import ArgParser


def main() -> int:
    parser = ArgParser("safe_parse_example.py")
    parser.add_argument("--port", "-p", "Port to listen on")
    parser.add_flag("--debug", "-d", "Enable debug mode")

    match parser.safe_parse():
        case Ok(result):
            pass
        case Err(error):
            print(f"error: {error}", file=sys.stderr)
            parser.print_help()
            return 2

    match result["--port"].safe_int(8080):
        case Ok(port):
            print(f"Listening on port {port} (debug={result['--debug'].as_bool()})")
            return 0
        case Err(error):
            print(f"error: {error}", file=sys.stderr)
            return 2


if __name__ == "__main__":
    sys.exit(main())
