"""
simple_argparser - A small command-line argument parser.

This package lets a program declare value-taking arguments, flags and a single
trailing final argument, parse an argument vector against them and read the
validated results through lazily converting typed accessors. Parsers can also
be declared in YAML or JSON definition files.
"""

from .config import ParserSettings, load_definition_file
from .definitions import ArgumentSpec, FinalArgumentSpec
from .exceptions import (
    ArgParserError,
    ConversionError,
    DefinitionFileError,
    DuplicateDefinition,
    MissingArgument,
    MissingValue,
    UnknownArgument,
)
from .parser import ArgParser
from .results import ResultEntry, ResultSet

__version__ = "1.0.0"
__all__ = [
    "ArgParser",
    "ArgumentSpec",
    "FinalArgumentSpec",
    "ResultEntry",
    "ResultSet",
    "ParserSettings",
    "load_definition_file",
    "ArgParserError",
    "UnknownArgument",
    "MissingArgument",
    "MissingValue",
    "ConversionError",
    "DuplicateDefinition",
    "DefinitionFileError",
]
