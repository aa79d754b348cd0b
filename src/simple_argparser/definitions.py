"""
Argument definitions declared by the host program.

``ArgumentSpec`` describes a named argument (value-taking or flag) and
``FinalArgumentSpec`` the single trailing positional argument. Both are
immutable once created; the registry owns them and result entries refer back
to them.
"""

from dataclasses import dataclass, field
from typing import Iterable, Union


def split_aliases(aliases: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """
    Split a comma-separated alias string into individual aliases.

    Empty tokens produced by leading, trailing or consecutive commas are
    dropped, so ``",-i,,-in,"`` yields ``("-i", "-in")``. An iterable of
    strings is accepted as well and filtered the same way.

    Args:
        aliases: Comma-separated aliases, an iterable of aliases, or None.

    Returns:
        tuple[str, ...]: The non-empty aliases in their original order.
    """
    if aliases is None:
        return ()
    if isinstance(aliases, str):
        parts = aliases.split(",")
    else:
        parts = list(aliases)
    return tuple(part for part in parts if part)


@dataclass(frozen=True)
class ArgumentSpec:
    """
    A named command-line argument.

    Attributes:
        name (str): Canonical name, including any prefix (e.g. ``--threads``).
        aliases (tuple[str, ...]): Alternate tokens addressing the same argument.
        description (str): Human readable description used in help text.
        is_flag (bool): True for presence-only arguments that consume no value.
        is_optional (bool): False if the argument must be provided. Always True for flags.
    """

    name: str
    aliases: tuple[str, ...] = ()
    description: str = ""
    is_flag: bool = False
    is_optional: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Argument name must be a non-empty string")
        if self.is_flag and not self.is_optional:
            # Flags are always optional; their presence means true.
            object.__setattr__(self, "is_optional", True)

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name, *self.aliases)

    @property
    def is_mandatory(self) -> bool:
        return not self.is_optional


@dataclass(frozen=True)
class FinalArgumentSpec:
    """
    The trailing positional argument bound to the last raw token.

    It has no aliases, is never a flag and is always mandatory; the read-only
    properties mirror ``ArgumentSpec`` so result entries can treat both alike.
    """

    name: str
    description: str = ""
    aliases: tuple[str, ...] = field(default=(), init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Final argument name must be a non-empty string")

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    @property
    def is_flag(self) -> bool:
        return False

    @property
    def is_optional(self) -> bool:
        return False

    @property
    def is_mandatory(self) -> bool:
        return True


AnySpec = Union[ArgumentSpec, FinalArgumentSpec]

__all__ = ["ArgumentSpec", "FinalArgumentSpec", "AnySpec", "split_aliases"]
