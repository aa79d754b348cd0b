"""
Help and example-command text for a configured parser.

Example output for a parser with one mandatory argument, one flag and a final
argument::

    Example Command: 
      prog <--input <value>> [--colour] file

      --input, -i <value>
        Input File: Mandatory

      --colour, -c
        Enable colour

      file
        File to process
"""

from .registry import ArgumentRegistry

VALUE_PLACEHOLDER = "<value>"


def render_example_command(registry: ArgumentRegistry, program_name: str) -> str:
    """
    Build a one-line usage example.

    Flags render as ``[--flag]``, optional arguments as ``[--opt <value>]``,
    mandatory ones as ``<--name <value>>`` and the final argument by its bare
    name at the end.
    """
    parts = [program_name]
    for spec in registry:
        if spec.is_flag:
            parts.append(f"[{spec.name}]")
        elif spec.is_optional:
            parts.append(f"[{spec.name} {VALUE_PLACEHOLDER}]")
        else:
            parts.append(f"<{spec.name} {VALUE_PLACEHOLDER}>")
    final = registry.final_argument
    if final is not None:
        parts.append(final.name)
    return " ".join(parts)


def render_help(registry: ArgumentRegistry, program_name: str) -> str:
    """
    Build the full help text: the example command followed by one block per
    argument, in registration order, and a block for the final argument.
    """
    lines = [
        "Example Command: ",
        "  " + render_example_command(registry, program_name),
        "",
    ]
    for spec in registry:
        header = "  " + ", ".join(spec.names)
        description = "    " + spec.description
        if not spec.is_flag:
            header += " " + VALUE_PLACEHOLDER
            description += ": Optional" if spec.is_optional else ": Mandatory"
        lines.extend([header, description, ""])

    final = registry.final_argument
    if final is not None:
        lines.extend(["  " + final.name, "    " + final.description, ""])

    return "\n".join(lines) + "\n"


__all__ = ["render_help", "render_example_command", "VALUE_PLACEHOLDER"]
