"""
Parser settings and parser definition files.

``ParserSettings`` holds the options that change how a parser behaves
(program name, split characters, error catching). A parser can also be
declared entirely in a YAML or JSON definition file::

    settings:
      program_name: convert
      catch_exceptions: true
    arguments:
      - name: --input
        aliases: -i
        description: Input file
        optional: false
      - name: --colour
        aliases: [-c]
        description: Enable colour
        flag: true
    final:
      name: output
      description: Output file

The definition file only configures the parser; argument values still come
from the command line.
"""

import dataclasses
import json
import os
from dataclasses import dataclass
from typing import Any, Mapping

import yaml

from .exceptions import DefinitionFileError

DEFAULT_PROGRAM_NAME = "PROGRAM"
DEFAULT_SPLIT_CHARS = "="

ARGUMENT_KEYS = frozenset({"name", "aliases", "description", "optional", "flag"})
FINAL_KEYS = frozenset({"name", "description"})
DEFINITION_KEYS = frozenset({"settings", "arguments", "final"})


@dataclass
class ParserSettings:
    """
    Behavioral options of an ``ArgParser``.

    Attributes:
        program_name (str): Name shown in help and example commands.
        split_chars (str): Characters separating an inline key from its value.
        catch_exceptions (bool): If True, ``try_parse`` reports errors and returns False
            instead of raising.
        print_help_on_caught_exception (bool): If True, a caught error prints a diagnostic
            and the help text.
    """

    program_name: str = DEFAULT_PROGRAM_NAME
    split_chars: str = DEFAULT_SPLIT_CHARS
    catch_exceptions: bool = False
    print_help_on_caught_exception: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.split_chars, str) or not self.split_chars:
            raise ValueError("split_chars must be a non-empty string")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserSettings":
        """
        Build settings from a mapping, rejecting unknown keys.

        Raises:
            DefinitionFileError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise DefinitionFileError(f"Unknown settings: {', '.join(unknown)}")
        for key, value in data.items():
            expected = type(getattr(cls, key))
            if not isinstance(value, expected):
                raise DefinitionFileError(
                    f"Setting '{key}' expects {expected.__name__}, "
                    f"got {type(value).__name__}: {value!r}"
                )
        try:
            return cls(**data)
        except ValueError as e:
            raise DefinitionFileError(str(e)) from e


def load_definition_file(path: str) -> dict[str, Any]:
    """
    Load a parser definition from a YAML or JSON file.

    Args:
        path (str): Path to the definition file.

    Returns:
        dict[str, Any]: The validated definition document.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DefinitionFileError: If the file format is not supported or invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Definition file not found: {path}")

    file_ext = os.path.splitext(path)[1].lower()

    with open(path, "r") as f:
        if file_ext in [".yaml", ".yml"]:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise DefinitionFileError(f"Invalid YAML file: {e}") from e
        elif file_ext == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise DefinitionFileError(f"Invalid JSON file: {e}") from e
        else:
            raise DefinitionFileError(
                f"Unsupported file format: {file_ext}. "
                "Supported formats are: .yaml, .yml, .json"
            )

    # An empty YAML document loads as None
    if data is None:
        data = {}
    return validate_definition(data)


def validate_definition(data: Any) -> dict[str, Any]:
    """
    Check the shape of a definition document.

    Raises:
        DefinitionFileError: On unknown keys, missing names or wrong types.
    """
    if not isinstance(data, dict):
        raise DefinitionFileError(
            f"Definition must be a mapping, got {type(data).__name__}"
        )
    unknown = sorted(set(data) - DEFINITION_KEYS)
    if unknown:
        raise DefinitionFileError(f"Unknown definition sections: {', '.join(unknown)}")

    settings = data.get("settings")
    if settings is None:
        settings = {}
    if not isinstance(settings, dict):
        raise DefinitionFileError("'settings' must be a mapping")

    arguments = data.get("arguments")
    if arguments is None:
        arguments = []
    if not isinstance(arguments, list):
        raise DefinitionFileError("'arguments' must be a list")
    for index, argument in enumerate(arguments):
        _check_entry(argument, ARGUMENT_KEYS, f"arguments[{index}]")
        aliases = argument.get("aliases", "")
        if not isinstance(aliases, (str, list)) or (
            isinstance(aliases, list) and not all(isinstance(a, str) for a in aliases)
        ):
            raise DefinitionFileError(
                f"arguments[{index}].aliases must be a string or a list of strings"
            )
        for key in ("optional", "flag"):
            if key in argument and not isinstance(argument[key], bool):
                raise DefinitionFileError(f"arguments[{index}].{key} must be a boolean")

    final = data.get("final")
    if final is not None:
        _check_entry(final, FINAL_KEYS, "final")

    return {"settings": settings, "arguments": arguments, "final": final}


def _check_entry(entry: Any, allowed: frozenset, where: str) -> None:
    if not isinstance(entry, dict):
        raise DefinitionFileError(f"{where} must be a mapping")
    unknown = sorted(set(entry) - allowed)
    if unknown:
        raise DefinitionFileError(f"{where} has unknown keys: {', '.join(unknown)}")
    name = entry.get("name")
    if not isinstance(name, str) or not name:
        raise DefinitionFileError(f"{where}.name must be a non-empty string")
    description = entry.get("description", "")
    if not isinstance(description, str):
        raise DefinitionFileError(f"{where}.description must be a string")


__all__ = [
    "ParserSettings",
    "load_definition_file",
    "validate_definition",
    "DEFAULT_PROGRAM_NAME",
    "DEFAULT_SPLIT_CHARS",
]
