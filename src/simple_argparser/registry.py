"""
Registry of declared arguments.

The registry keeps the declared ``ArgumentSpec`` objects in registration order
(used for validation and help rendering) together with a lookup table mapping
every canonical name and alias to the index of its spec. It also holds the
optional ``FinalArgumentSpec``.
"""

from typing import Iterable, Iterator, Optional, Union

from .definitions import ArgumentSpec, FinalArgumentSpec, split_aliases
from .exceptions import DuplicateDefinition, UnknownArgument
from .logger import logger


class ArgumentRegistry:
    """
    Ordered collection of argument definitions with name/alias lookup.

    Registering a name or alias that is already known raises
    ``DuplicateDefinition``; nothing is registered in that case.
    """

    def __init__(self) -> None:
        self._specs: list[ArgumentSpec] = []
        self._index: dict[str, int] = {}
        self._final: Optional[FinalArgumentSpec] = None

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._specs)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        return (
            f"ArgumentRegistry(args={len(self._specs)}, names={len(self._index)}, "
            f"final={self._final.name if self._final else None})"
        )

    @property
    def specs(self) -> tuple[ArgumentSpec, ...]:
        """Registered specs in registration order."""
        return tuple(self._specs)

    @property
    def final_argument(self) -> Optional[FinalArgumentSpec]:
        return self._final

    @property
    def has_final_argument(self) -> bool:
        return self._final is not None

    def add_value_argument(
        self,
        name: str,
        aliases: Union[str, Iterable[str], None] = "",
        description: str = "",
        optional: bool = True,
    ) -> ArgumentSpec:
        """
        Register an argument that requires a value, e.g. ``--threads 12``.

        Args:
            name: Full name of the argument including its prefix, e.g. ``--threads``.
            aliases: Comma-separated aliases including prefixes, e.g. ``"-t,-j"``.
            description: Description shown in help text.
            optional: False if the argument must be provided.

        Returns:
            ArgumentSpec: The registered spec.

        Raises:
            DuplicateDefinition: If the name or an alias is already registered.
        """
        spec = ArgumentSpec(
            name=name,
            aliases=split_aliases(aliases),
            description=description,
            is_flag=False,
            is_optional=optional,
        )
        return self._register(spec)

    def add_flag_argument(
        self,
        name: str,
        aliases: Union[str, Iterable[str], None] = "",
        description: str = "",
    ) -> ArgumentSpec:
        """
        Register a presence-only argument, e.g. ``--colour``.

        Flags never consume a value and are always optional.

        Raises:
            DuplicateDefinition: If the name or an alias is already registered.
        """
        spec = ArgumentSpec(
            name=name,
            aliases=split_aliases(aliases),
            description=description,
            is_flag=True,
            is_optional=True,
        )
        return self._register(spec)

    def set_final_argument(self, name: str, description: str = "") -> FinalArgumentSpec:
        """
        Set the mandatory trailing argument, replacing any previous one.

        e.g. ``prog --arg1 val1 --arg2=val2 --flag FINAL_ARGUMENT``
        """
        if name in self._index:
            raise DuplicateDefinition(name, self._specs[self._index[name]].name)
        if self._final is not None:
            logger.debug("Replacing final argument %s with %s", self._final.name, name)
        self._final = FinalArgumentSpec(name=name, description=description)
        return self._final

    def lookup(self, token: str) -> ArgumentSpec:
        """
        Resolve a canonical name or alias to its spec.

        Raises:
            UnknownArgument: If the token is not registered.
        """
        try:
            return self._specs[self._index[token]]
        except KeyError:
            raise UnknownArgument(token) from None

    def _register(self, spec: ArgumentSpec) -> ArgumentSpec:
        seen: set[str] = set()
        for candidate in spec.names:
            if candidate in self._index:
                existing = self._specs[self._index[candidate]].name
                raise DuplicateDefinition(candidate, existing)
            if self._final is not None and candidate == self._final.name:
                raise DuplicateDefinition(candidate, self._final.name)
            if candidate in seen:
                raise DuplicateDefinition(candidate, spec.name)
            seen.add(candidate)

        logger.debug("Adding argument %s -> %s", spec.name, spec.description)
        position = len(self._specs)
        self._specs.append(spec)
        for candidate in spec.names:
            self._index[candidate] = position
        return spec


__all__ = ["ArgumentRegistry"]
