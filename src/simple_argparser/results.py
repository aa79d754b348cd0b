"""
Parse results and typed accessors.

Each resolved argument becomes a ``ResultEntry`` holding its raw string value;
conversion to ``int``, ``float`` or ``bool`` happens lazily, when the host
reads the value. ``ResultSet`` keeps the entries in parse order and indexes
them by canonical argument name.
"""

from typing import Any, Callable, Iterator, Optional, TypeVar

from result import Err, Ok, Result

from .definitions import AnySpec
from .exceptions import ConversionError, MissingArgument
from .logger import logger

T = TypeVar("T")

TRUE_VALUES = ("true", "yes")


def _to_int(value: str) -> int:
    return int(value, 10)


class ResultEntry:
    """
    A resolved argument and its raw value.

    Every reader takes a default that is returned when the raw value is empty,
    which is how omitted optional arguments are represented.
    """

    __slots__ = ("spec", "value")

    def __init__(self, spec: AnySpec, value: str) -> None:
        self.spec = spec
        self.value = value

    def __repr__(self) -> str:
        return f"ResultEntry(name={self.spec.name!r}, value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultEntry):
            return NotImplemented
        return self.spec == other.spec and self.value == other.value

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def is_empty(self) -> bool:
        return len(self.value) == 0

    def _convert(self, converter: Callable[[str], T], target: type, default: T) -> T:
        if self.is_empty:
            return default
        try:
            return converter(self.value)
        except (TypeError, ValueError) as e:
            raise ConversionError(self.value, target, self.spec.name) from e

    def _safe_convert(
        self, converter: Callable[[str], T], target: type, default: T
    ) -> Result[T, ConversionError]:
        try:
            return Ok(self._convert(converter, target, default))
        except ConversionError as e:
            return Err(e)

    def as_string(self, default: str = "") -> str:
        """Return the raw value, or ``default`` if it is empty."""
        if self.is_empty:
            return default
        return self.value

    def as_int(self, default: int = 0) -> int:
        """
        Return the value as a base-10 integer, or ``default`` if it is empty.

        Raises:
            ConversionError: If the raw value is not an integer.
        """
        return self._convert(_to_int, int, default)

    def as_long(self, default: int = 0) -> int:
        """Same as ``as_int``; Python integers have no fixed width."""
        return self._convert(_to_int, int, default)

    def as_float(self, default: float = 0.0) -> float:
        """
        Return the value as a float, or ``default`` if it is empty.

        Raises:
            ConversionError: If the raw value is not a number.
        """
        return self._convert(float, float, default)

    def as_double(self, default: float = 0.0) -> float:
        """Same as ``as_float``; Python floats are double precision."""
        return self._convert(float, float, default)

    def as_bool(self, default: bool = False) -> bool:
        """
        Return True if the raw value is exactly ``"true"`` or ``"yes"``.

        Any other non-empty value is False; an empty value returns ``default``.
        """
        if self.is_empty:
            return default
        return self.value in TRUE_VALUES

    def safe_int(self, default: int = 0) -> Result[int, ConversionError]:
        return self._safe_convert(_to_int, int, default)

    def safe_long(self, default: int = 0) -> Result[int, ConversionError]:
        return self._safe_convert(_to_int, int, default)

    def safe_float(self, default: float = 0.0) -> Result[float, ConversionError]:
        return self._safe_convert(float, float, default)

    def safe_double(self, default: float = 0.0) -> Result[float, ConversionError]:
        return self._safe_convert(float, float, default)


class ResultSet:
    """
    Ordered collection of ``ResultEntry`` objects indexed by canonical name.

    The set is cleared at the start of every parse. After a successful parse
    every registered argument has exactly one entry; after a failed parse the
    contents are incomplete and must not be used.
    """

    def __init__(self) -> None:
        self._entries: list[ResultEntry] = []
        self._by_name: dict[str, ResultEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, name: str) -> ResultEntry:
        return self.get(name)

    def __repr__(self) -> str:
        return f"ResultSet({self.as_dict()!r})"

    @property
    def entries(self) -> tuple[ResultEntry, ...]:
        return tuple(self._entries)

    def add(self, spec: AnySpec, value: str) -> Optional[ResultEntry]:
        """
        Record ``value`` for ``spec``.

        The first value recorded for an argument is kept; later ones are
        ignored.

        Returns:
            Optional[ResultEntry]: The new entry, or None if the argument was
            already present.
        """
        if spec.name in self._by_name:
            logger.warning(
                "Ignoring repeated argument %s (keeping %r, dropping %r)",
                spec.name,
                self._by_name[spec.name].value,
                value,
            )
            return None
        entry = ResultEntry(spec, value)
        self._entries.append(entry)
        self._by_name[spec.name] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()
        self._by_name.clear()

    def get(self, name: str) -> ResultEntry:
        """
        Return the entry for the canonical argument ``name``.

        Raises:
            MissingArgument: If no entry exists for ``name``.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise MissingArgument(name) from None

    def safe_get(self, name: str) -> Result[ResultEntry, MissingArgument]:
        try:
            return Ok(self.get(name))
        except MissingArgument as e:
            return Err(e)

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def as_dict(self) -> dict[str, Any]:
        """Map each canonical name to its raw string value, in parse order."""
        return {entry.name: entry.value for entry in self._entries}


__all__ = ["ResultEntry", "ResultSet", "TRUE_VALUES"]
