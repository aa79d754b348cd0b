"""
ArgParser - declare command-line arguments, parse an argument vector and read
the validated results through typed accessors.

Arguments are either value-taking (``--threads 12`` or ``--threads=12``) or
flags (``--verbose``). A single final argument may be bound to the last token
of the argument vector. Mandatory arguments are enforced after parsing;
omitted flags read as False and omitted optional values as empty.
"""

import sys
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from result import Err, Ok, Result
from rich.console import Console

from . import reporting
from .config import (
    DEFAULT_PROGRAM_NAME,
    DEFAULT_SPLIT_CHARS,
    ParserSettings,
    load_definition_file,
    validate_definition,
)
from .definitions import ArgumentSpec, FinalArgumentSpec
from .exceptions import ArgParserError, MissingArgument
from .help import render_example_command, render_help
from .logger import logger
from .registry import ArgumentRegistry
from .results import ResultEntry, ResultSet
from .tokenizer import scan_tokens
from .validator import finalize_results


class ArgParser:
    """
    A command-line argument parser.

    Prepare the parser with ``add_argument``, ``add_flag`` and
    ``set_final_argument``, configure it with the ``set_*`` methods, then call
    ``parse``.

    Example:
        parser = ArgParser("convert")
        parser.add_argument("--input", "-i", "Input File", optional=False)
        parser.add_flag("--colour", "-c", "Enable colour")

        results = parser.parse(["convert", "--input", "in.txt", "-c"])
        results["--input"].as_string()   # "in.txt"
        results["--colour"].as_bool()    # True
    """

    def __init__(
        self,
        program_name: str = DEFAULT_PROGRAM_NAME,
        *,
        split_chars: str = DEFAULT_SPLIT_CHARS,
        catch_exceptions: bool = False,
        print_help_on_caught_exception: bool = True,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """
        Initialize an empty parser.

        Args:
            program_name: Name used in help text and example commands.
            split_chars: Characters separating an inline key from its value.
            catch_exceptions: If True, ``try_parse`` reports errors instead of raising.
            print_help_on_caught_exception: If True, caught errors print a diagnostic and help.
            console: Console receiving help text (defaults to stdout).
            error_console: Console receiving diagnostics (defaults to stderr).
        """
        self.settings = ParserSettings(
            program_name=program_name,
            split_chars=split_chars,
            catch_exceptions=catch_exceptions,
            print_help_on_caught_exception=print_help_on_caught_exception,
        )
        self.registry = ArgumentRegistry()
        self._results = ResultSet()
        self.console: Console = console or reporting.console
        self.error_console: Console = error_console or reporting.error_console

    def __repr__(self) -> str:
        return (
            f"ArgParser(program_name={self.settings.program_name!r}, "
            f"args={len(self.registry)}, final={self.registry.has_final_argument})"
        )

    def __getitem__(self, name: str) -> ResultEntry:
        """
        Get the result entry for the canonical argument ``name``.

        Raises:
            MissingArgument: If the argument has no result.
        """
        return self._results.get(name)

    @property
    def results(self) -> ResultSet:
        """Results of the most recent parse."""
        return self._results

    # Definition

    def add_argument(
        self,
        name: str,
        aliases: Union[str, Iterable[str], None] = "",
        description: str = "",
        optional: bool = True,
    ) -> ArgumentSpec:
        """
        Add an argument that requires a value, e.g. ``--threads 12``.

        Args:
            name: Full name of the argument, including any prefix, e.g. ``--threads``.
            aliases: Comma-separated aliases including prefixes, e.g. ``"-t,-j"``.
            description: Description of the argument.
            optional: False if the argument is mandatory.

        Raises:
            DuplicateDefinition: If the name or an alias is already in use.
        """
        spec = self.registry.add_value_argument(name, aliases, description, optional)
        self._warn_split_chars(spec)
        return spec

    def add_flag(
        self,
        name: str,
        aliases: Union[str, Iterable[str], None] = "",
        description: str = "",
    ) -> ArgumentSpec:
        """
        Add an argument that doesn't take a value, e.g. ``--enable-colour``.

        Raises:
            DuplicateDefinition: If the name or an alias is already in use.
        """
        spec = self.registry.add_flag_argument(name, aliases, description)
        self._warn_split_chars(spec)
        return spec

    def set_final_argument(self, name: str, description: str = "") -> FinalArgumentSpec:
        """Set the mandatory final argument, replacing any previous one."""
        return self.registry.set_final_argument(name, description)

    def _warn_split_chars(self, spec: ArgumentSpec) -> None:
        for candidate in spec.names:
            if any(char in self.settings.split_chars for char in candidate):
                logger.warning(
                    "Argument name %s contains a split character (%s); "
                    "it can only be given in the inline form",
                    candidate,
                    self.settings.split_chars,
                )

    # Configuration

    def set_program_name(self, name: str) -> None:
        """Set the program name used in help text."""
        self.settings.program_name = name

    def set_split_chars(self, split_chars: str) -> None:
        """
        Set the characters separating inline keys from values (default ``=``).

        Raises:
            ValueError: If ``split_chars`` is empty.
        """
        if not split_chars:
            raise ValueError("split_chars must be a non-empty string")
        self.settings.split_chars = split_chars

    def set_catch_exceptions(self, catch_exceptions: bool) -> None:
        """Make ``try_parse`` return False on parsing errors instead of raising."""
        self.settings.catch_exceptions = catch_exceptions

    def set_print_help_on_caught_exception(self, print_help: bool) -> None:
        """Print a diagnostic and the help text when ``try_parse`` catches an error."""
        self.settings.print_help_on_caught_exception = print_help

    # Parsing

    def parse(self, argv: Optional[Sequence[str]] = None) -> ResultSet:
        """
        Parse and validate the argument vector.

        Args:
            argv: Full argument vector, program name first. If None, uses sys.argv.

        Returns:
            ResultSet: The validated results (also available as ``self.results``).

        Raises:
            UnknownArgument: If a key doesn't match any argument name or alias.
            MissingValue: If the last scanned key has no value.
            MissingArgument: If a mandatory argument or the final argument is missing.
        """
        if argv is None:
            argv = sys.argv
        argv = list(argv)

        self._results.clear()

        final = self.registry.final_argument
        window = argv[1:]
        final_value: Optional[str] = None
        if final is not None:
            if not window:
                raise MissingArgument(final.name)
            window, final_value = window[:-1], window[-1]

        for spec, value in scan_tokens(window, self.registry, self.settings.split_chars):
            self._results.add(spec, value)

        if final is not None and final_value is not None:
            logger.debug("Got final: (%s) -> (%s)", final.name, final_value)
            self._results.add(final, final_value)

        return finalize_results(self.registry, self._results)

    def safe_parse(
        self, argv: Optional[Sequence[str]] = None
    ) -> Result[ResultSet, ArgParserError]:
        """
        Parse the argument vector without raising.

        Returns:
            Result[ResultSet, ArgParserError]:
                - Ok with the validated results,
                - Err with the parsing error if parsing fails.
        """
        try:
            return Ok(self.parse(argv))
        except ArgParserError as e:
            return Err(e)

    def try_parse(self, argv: Optional[Sequence[str]] = None) -> bool:
        """
        Parse the argument vector, reporting errors when configured to catch them.

        See ``set_catch_exceptions`` and ``set_print_help_on_caught_exception``.

        Returns:
            bool: True on success, False if an error was caught.
        """
        return reporting.guarded_parse(self, argv)

    # Help

    def get_help(self) -> str:
        """Create the help text for the configured arguments."""
        return render_help(self.registry, self.settings.program_name)

    def get_example_command(self) -> str:
        """Create an example command for the configured arguments."""
        return render_example_command(self.registry, self.settings.program_name)

    def print_help(self) -> None:
        reporting.print_plain(self.console, self.get_help())

    # Construction from definitions

    @classmethod
    def from_definition(
        cls,
        definition: Mapping[str, Any],
        *,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> "ArgParser":
        """
        Build a parser from a definition mapping (see ``simple_argparser.config``).

        Raises:
            DefinitionFileError: If the definition is malformed.
            DuplicateDefinition: If two arguments share a name or alias.
        """
        data = validate_definition(
            dict(definition) if isinstance(definition, Mapping) else definition
        )
        settings = ParserSettings.from_mapping(data["settings"])
        parser = cls(
            settings.program_name,
            split_chars=settings.split_chars,
            catch_exceptions=settings.catch_exceptions,
            print_help_on_caught_exception=settings.print_help_on_caught_exception,
            console=console,
            error_console=error_console,
        )
        for argument in data["arguments"]:
            if argument.get("flag", False):
                parser.add_flag(
                    argument["name"],
                    argument.get("aliases", ""),
                    argument.get("description", ""),
                )
            else:
                parser.add_argument(
                    argument["name"],
                    argument.get("aliases", ""),
                    argument.get("description", ""),
                    argument.get("optional", True),
                )
        final = data["final"]
        if final is not None:
            parser.set_final_argument(final["name"], final.get("description", ""))
        return parser

    @classmethod
    def from_file(
        cls,
        path: str,
        *,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> "ArgParser":
        """
        Build a parser from a YAML or JSON definition file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            DefinitionFileError: If the file format is unsupported or invalid.
        """
        logger.debug("Loading parser definition from %s", path)
        return cls.from_definition(
            load_definition_file(path), console=console, error_console=error_console
        )


__all__ = ["ArgParser"]
