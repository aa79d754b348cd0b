import pytest
from result import Err, Ok

from simple_argparser import (
    ArgParser,
    ArgParserError,
    MissingArgument,
    MissingValue,
    ResultSet,
    UnknownArgument,
)


@pytest.fixture
def parser():
    """Parser mirroring a typical converter tool."""
    p = ArgParser("convert")
    p.add_argument("--input", "-i", "Input File", optional=False)
    p.add_argument("--threads", "-t,-j", "Worker threads", optional=True)
    p.add_flag("--colour", "-c", "Enable colour")
    return p


class TestArgParser:
    """Test suite for ArgParser parsing and validation."""

    def test_repr(self, parser):
        """Test the string representation of ArgParser."""
        assert repr(parser) == "ArgParser(program_name='convert', args=3, final=False)"
        parser.set_final_argument("output")
        assert repr(parser) == "ArgParser(program_name='convert', args=3, final=True)"

    def test_value_argument_round_trip(self, parser):
        """Test that a value given after its key is stored verbatim."""
        result = parser.parse(["prog", "--input", "foo.txt"])

        assert isinstance(result, ResultSet)
        assert result["--input"].as_string() == "foo.txt"

    def test_inline_value_matches_separate_value(self, parser):
        """Test that --key=value parses the same as --key value."""
        separate = parser.parse(["prog", "--input", "foo.txt"]).as_dict()
        inline = parser.parse(["prog", "--input=foo.txt"]).as_dict()

        assert inline == separate
        assert inline["--input"] == "foo.txt"

    def test_alias_resolves_to_canonical_name(self, parser):
        """Test that results are stored under the canonical name when an alias is used."""
        result = parser.parse(["prog", "-i", "a.txt", "-j", "8"])

        assert result["--input"].as_string() == "a.txt"
        assert result["--threads"].as_int() == 8
        assert "-i" not in result
        assert "-j" not in result

    def test_program_name_is_skipped(self, parser):
        """Test that argv[0] is never interpreted as an argument."""
        result = parser.parse(["--colour", "--input", "x"])

        assert result["--colour"].as_bool() is False
        assert result["--input"].as_string() == "x"

    def test_flag_present_reads_true(self, parser):
        """Test that a flag on the command line reads True."""
        result = parser.parse(["prog", "-c", "--input", "x"])

        assert result["--colour"].value == "true"
        assert result["--colour"].as_bool() is True

    def test_missing_mandatory_argument(self, parser):
        """Test that omitting a mandatory argument raises MissingArgument naming it."""
        with pytest.raises(MissingArgument) as exc_info:
            parser.parse(["prog", "--threads", "4"])

        assert exc_info.value.key == "--input"
        assert "Missing mandatory argument: --input" in str(exc_info.value)

    def test_first_missing_mandatory_argument_is_reported(self):
        """Test that validation follows registration order."""
        parser = ArgParser()
        parser.add_argument("--first", "", "", optional=False)
        parser.add_argument("--second", "", "", optional=False)

        with pytest.raises(MissingArgument) as exc_info:
            parser.parse(["prog"])
        assert exc_info.value.key == "--first"

    def test_unknown_argument(self, parser):
        """Test that an unregistered token raises UnknownArgument."""
        with pytest.raises(UnknownArgument) as exc_info:
            parser.parse(["prog", "--bogus"])

        assert exc_info.value.key == "--bogus"
        assert str(exc_info.value) == "Unknown argument: --bogus"

    def test_unknown_inline_key(self, parser):
        """Test that the key part of an inline token must be registered."""
        with pytest.raises(UnknownArgument) as exc_info:
            parser.parse(["prog", "--output=file.txt", "--input", "x"])
        assert exc_info.value.key == "--output"

    def test_dangling_key_raises_missing_value(self):
        """Test that a value-taking key without a following value raises MissingValue."""
        parser = ArgParser()
        parser.add_argument("--threads", "-t", "Worker threads", True)

        with pytest.raises(MissingValue) as exc_info:
            parser.parse(["prog", "--threads"])
        assert exc_info.value.key == "--threads"

    def test_dangling_alias_reports_alias(self):
        """Test that MissingValue names the token exactly as typed."""
        parser = ArgParser()
        parser.add_argument("--threads", "-t", "Worker threads", True)

        with pytest.raises(MissingValue) as exc_info:
            parser.parse(["prog", "-t"])
        assert exc_info.value.key == "-t"

    def test_value_token_is_consumed_whole(self, parser):
        """Test that a value may look like a key or contain the split character."""
        result = parser.parse(["prog", "--input", "--colour", "--threads", "a=b"])

        assert result["--input"].as_string() == "--colour"
        assert result["--threads"].as_string() == "a=b"
        assert result["--colour"].as_bool() is False

    def test_empty_value_token(self, parser):
        """Test that an explicit empty value reads as the caller default."""
        result = parser.parse(["prog", "--input", "x", "--threads", ""])

        assert result["--threads"].value == ""
        assert result["--threads"].as_int(3) == 3

    def test_repeated_argument_keeps_first_value(self, parser):
        """Test that each argument has exactly one entry after parsing."""
        result = parser.parse(["prog", "--input", "first", "-i", "second"])

        assert result["--input"].as_string() == "first"
        assert result.names().count("--input") == 1

    def test_every_registered_argument_has_one_entry(self, parser):
        """Test the result set covers each registered argument exactly once."""
        result = parser.parse(["prog", "--input", "x"])

        assert sorted(result.names()) == ["--colour", "--input", "--threads"]
        assert len(result) == 3

    def test_parse_order_then_defaults(self, parser):
        """Test that parsed entries come first, then synthesized ones in registration order."""
        result = parser.parse(["prog", "-c", "--input", "x"])
        assert result.names() == ["--colour", "--input", "--threads"]

    def test_parse_twice_replaces_results(self, parser):
        """Test that a second parse does not keep entries from the first."""
        parser.parse(["prog", "--input", "one", "--threads", "2", "-c"])
        result = parser.parse(["prog", "--input", "two"])

        assert result["--input"].as_string() == "two"
        assert result["--threads"].as_string("none") == "none"
        assert result["--colour"].as_bool() is False
        assert len(result) == 3

    def test_failed_parse_after_success(self, parser):
        """Test that a failed parse clears the previous results."""
        parser.parse(["prog", "--input", "one"])
        with pytest.raises(UnknownArgument):
            parser.parse(["prog", "--nope"])
        assert "--input" not in parser.results

    def test_getitem_delegates_to_results(self, parser):
        """Test parser[name] reads from the most recent parse."""
        parser.parse(["prog", "--input", "x"])

        assert parser["--input"].as_string() == "x"
        assert parser.results is parser.results
        with pytest.raises(MissingArgument):
            parser["--typo"]

    def test_parse_uses_sys_argv_by_default(self, parser, monkeypatch):
        """Test that parse() without arguments reads sys.argv."""
        monkeypatch.setattr("sys.argv", ["convert", "--input", "from-argv"])
        result = parser.parse()
        assert result["--input"].as_string() == "from-argv"

    def test_custom_split_chars(self, parser):
        """Test that any of the configured split characters separates key and value."""
        parser.set_split_chars(":=")
        result = parser.parse(["prog", "--input:a.txt", "--threads=4"])

        assert result["--input"].as_string() == "a.txt"
        assert result["--threads"].as_int() == 4

    def test_empty_split_chars_rejected(self, parser):
        with pytest.raises(ValueError):
            parser.set_split_chars("")
        with pytest.raises(ValueError):
            ArgParser(split_chars="")


class TestFinalArgument:
    """Test suite for the trailing final argument."""

    def test_final_argument_binding(self):
        """Test that the last token binds to the final argument."""
        parser = ArgParser()
        parser.add_flag("--flag", "", "A flag")
        parser.set_final_argument("file", "The file")

        result = parser.parse(["prog", "--flag", "trailing.txt"])

        assert result["file"].as_string() == "trailing.txt"
        assert result["--flag"].as_bool() is True

    def test_final_argument_ignores_content(self):
        """Test that the last token is bound even if it looks like a key."""
        parser = ArgParser()
        parser.add_flag("--flag", "", "A flag")
        parser.set_final_argument("file")

        result = parser.parse(["prog", "--flag"])

        assert result["file"].as_string() == "--flag"
        assert result["--flag"].as_bool() is False

    def test_final_argument_excluded_from_scanning(self):
        """Test that a key needing a value cannot take the final token."""
        parser = ArgParser()
        parser.add_argument("--threads", "-t", "", True)
        parser.set_final_argument("file")

        with pytest.raises(MissingValue) as exc_info:
            parser.parse(["prog", "--threads", "data.bin"])
        assert exc_info.value.key == "--threads"

    def test_final_argument_accepts_empty_string(self):
        parser = ArgParser()
        parser.set_final_argument("file")

        result = parser.parse(["prog", ""])
        assert result["file"].value == ""
        assert result["file"].as_string("fallback") == "fallback"

    def test_final_argument_without_tokens(self):
        """Test that a missing final token raises MissingArgument."""
        parser = ArgParser()
        parser.set_final_argument("file")

        with pytest.raises(MissingArgument) as exc_info:
            parser.parse(["prog"])
        assert exc_info.value.key == "file"

        with pytest.raises(MissingArgument):
            parser.parse([])

    def test_set_final_argument_replaces_previous(self):
        parser = ArgParser()
        parser.set_final_argument("first")
        parser.set_final_argument("second", "Second file")

        result = parser.parse(["prog", "x"])
        assert "first" not in result
        assert result["second"].as_string() == "x"

    def test_final_argument_with_mandatory_values(self):
        """Test a full command line with arguments, inline values, flags and a final argument."""
        parser = ArgParser("convert")
        parser.add_argument("--input", "-i", "Input File", optional=False)
        parser.add_argument("--threads", "-t", "Worker threads")
        parser.add_flag("--colour", "-c", "Enable colour")
        parser.set_final_argument("output", "Output file")

        result = parser.parse(["convert", "-i", "in.txt", "--threads=4", "-c", "out.txt"])

        assert result.as_dict() == {
            "--input": "in.txt",
            "--threads": "4",
            "--colour": "true",
            "output": "out.txt",
        }


class TestSafeParse:
    """Test suite for the Result-returning parse."""

    def test_safe_parse_ok(self, parser):
        outcome = parser.safe_parse(["prog", "--input", "x"])

        assert isinstance(outcome, Ok)
        assert outcome.unwrap()["--input"].as_string() == "x"

    @pytest.mark.parametrize(
        "argv, error_type",
        [
            (["prog", "--bogus"], UnknownArgument),
            (["prog", "--input"], MissingValue),
            (["prog", "--colour"], MissingArgument),
        ],
    )
    def test_safe_parse_err(self, parser, argv, error_type):
        outcome = parser.safe_parse(argv)

        assert isinstance(outcome, Err)
        assert isinstance(outcome.err(), error_type)
        assert isinstance(outcome.err(), ArgParserError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
