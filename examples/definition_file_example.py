#!/usr/bin/env python3
"""
Example demonstrating a parser declared in a YAML definition file.

Errors are caught and reported together with the help text, so running this
script without arguments prints a diagnostic instead of a traceback:

    python definition_file_example.py
    python definition_file_example.py --name run1 -T 31.5 -v results/
"""

import os
import sys

from simple_argparser import ArgParser

DEFINITION = os.path.join(os.path.dirname(__file__), "simulation.yaml")


def main() -> int:
    parser = ArgParser.from_file(DEFINITION)

    if not parser.try_parse():
        return 1

    result = parser.results
    print(f"Simulation Name: {result['--name'].as_string()}")
    print(f"Temperature: {result['--temperature'].as_double(27.0)}°C")
    print(f"Number of Simulations: {result['--count'].as_int(100)}")
    print(f"Verbose: {result['--verbose'].as_bool()}")
    print(f"Output Directory: {result['output_dir'].as_string()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
