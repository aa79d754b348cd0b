#!/usr/bin/env python3
"""
Example script demonstrating the usage of ArgParser.

Run for instance:
    python basic_example.py -i data.csv --threads=4 -c out.csv
"""

from simple_argparser import ArgParser


def main() -> None:
    """Main function demonstrating the parser."""
    parser = ArgParser("basic_example.py")
    parser.add_argument("--input", "-i", "Input File", optional=False)
    parser.add_argument("--threads", "-t,-j", "Number of worker threads")
    parser.add_flag("--colour", "-c", "Enable colour")
    parser.set_final_argument("output", "Output file")

    print(parser.get_help())

    result = parser.parse()

    print("Parsed Arguments:")
    print("-" * 30)
    print(f"Input: {result['--input'].as_string()}")
    print(f"Threads: {result['--threads'].as_int(1)}")
    print(f"Colour: {result['--colour'].as_bool()}")
    print(f"Output: {result['output'].as_string()}")


if __name__ == "__main__":
    main()
