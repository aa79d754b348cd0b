"""
Error reporting around the core parse call.

``guarded_parse`` runs a parse and, when the parser is configured to catch
errors, turns parsing errors into a False return value plus a diagnostic on
the error console and the help text on the output console. Text is printed
verbatim: rich markup and highlighting are disabled so that bracketed help
text such as ``[--flag]`` is not interpreted.
"""

from typing import TYPE_CHECKING, Optional, Sequence

from rich.console import Console

from .exceptions import ArgParserError, MissingArgument, MissingValue, UnknownArgument
from .logger import logger

if TYPE_CHECKING:
    from .parser import ArgParser

console = Console()
error_console = Console(stderr=True)


def format_diagnostic(error: ArgParserError, final_name: Optional[str] = None) -> str:
    """
    Return the user-facing diagnostic for a parsing error.

    Args:
        error: The error raised while parsing.
        final_name: Name of the configured final argument, used for a hint when
            a value is missing.
    """
    if isinstance(error, UnknownArgument):
        return f"Error: Unknown argument provided: {error.key}"
    if isinstance(error, MissingArgument):
        return f"Error: Required argument {error.key} is missing"
    if isinstance(error, MissingValue):
        message = f"Error: Last argument {error.key} is missing corresponding value"
        if final_name is not None:
            message += f"\n  Hint: Did you forget the final argument '{final_name}'?"
        return message
    return f"Error: {error}"


def print_plain(target: Console, text: str) -> None:
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def guarded_parse(parser: "ArgParser", argv: Optional[Sequence[str]] = None) -> bool:
    """
    Parse ``argv`` with ``parser``, catching parsing errors if configured to.

    When ``parser.settings.catch_exceptions`` is False errors propagate
    unchanged. Otherwise the error is reported (if
    ``print_help_on_caught_exception`` is set) and False is returned.

    Returns:
        bool: True if parsing and validation succeeded.
    """
    try:
        parser.parse(argv)
        return True
    except (UnknownArgument, MissingArgument, MissingValue) as e:
        if not parser.settings.catch_exceptions:
            raise
        logger.debug("Caught parsing error: %s", e)
        if parser.settings.print_help_on_caught_exception:
            final = parser.registry.final_argument
            print_plain(
                parser.error_console,
                format_diagnostic(e, final.name if final is not None else None),
            )
            print_plain(parser.console, parser.get_help())
        return False


__all__ = ["guarded_parse", "format_diagnostic", "print_plain", "console", "error_console"]
