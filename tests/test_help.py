#!/usr/bin/env python3
"""
Tests for help text and example command rendering.
"""

import io

import pytest
from rich.console import Console

from simple_argparser import ArgParser


@pytest.fixture
def parser():
    p = ArgParser("convert")
    p.add_argument("--input", "-i", "Input File", optional=False)
    p.add_argument("--threads", "-t,-j", "Worker threads")
    p.add_flag("--colour", "-c", "Enable colour")
    return p


class TestExampleCommand:
    """Test suite for get_example_command."""

    def test_example_command_conventions(self, parser):
        assert (
            parser.get_example_command()
            == "convert <--input <value>> [--threads <value>] [--colour]"
        )

    def test_example_command_with_final_argument(self, parser):
        parser.set_final_argument("output", "Output file")
        assert parser.get_example_command().endswith("[--colour] output")

    def test_default_program_name(self):
        parser = ArgParser()
        assert parser.get_example_command() == "PROGRAM"

    def test_program_name_can_change(self, parser):
        parser.set_program_name("tool")
        assert parser.get_example_command().startswith("tool ")


class TestHelpText:
    """Test suite for get_help."""

    def test_help_layout(self, parser):
        parser.set_final_argument("output", "Output file")

        expected = (
            "Example Command: \n"
            "  convert <--input <value>> [--threads <value>] [--colour] output\n"
            "\n"
            "  --input, -i <value>\n"
            "    Input File: Mandatory\n"
            "\n"
            "  --threads, -t, -j <value>\n"
            "    Worker threads: Optional\n"
            "\n"
            "  --colour, -c\n"
            "    Enable colour\n"
            "\n"
            "  output\n"
            "    Output file\n"
            "\n"
        )
        assert parser.get_help() == expected

    def test_help_without_arguments(self):
        parser = ArgParser("empty")
        assert parser.get_help() == "Example Command: \n  empty\n\n"

    def test_print_help_writes_verbatim(self, parser):
        """Bracketed text must not be swallowed as console markup."""
        buffer = io.StringIO()
        parser.console = Console(file=buffer, width=40)

        parser.print_help()

        output = buffer.getvalue()
        assert "[--colour]" in output
        assert "[--threads <value>]" in output
        assert output.startswith("Example Command:")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
