"""
Tokenizer for raw command-line arguments.

A single left-to-right pass turns the scanning window of the argument vector
into ``(spec, raw_value)`` pairs. Tokens are read as keys until a value-taking
key is found, after which the next token is consumed whole as its value.
Keys may also carry their value inline, e.g. ``--config=./the.cfg``.
"""

from typing import Iterable, Iterator, Optional

from .definitions import ArgumentSpec
from .exceptions import MissingValue
from .logger import logger
from .registry import ArgumentRegistry

FLAG_PRESENT = "true"
FLAG_ABSENT = "false"


def split_token(token: str, split_chars: str) -> Optional[tuple[str, str]]:
    """
    Split ``token`` into key and value at the first split character.

    Any character of ``split_chars`` acts as a separator; only the first
    occurrence in the token splits it, so ``--opt=a=b`` yields
    ``("--opt", "a=b")``.

    Returns:
        Optional[tuple[str, str]]: ``(key, value)`` or None if the token holds
        no split character.
    """
    for position, char in enumerate(token):
        if char in split_chars:
            return token[:position], token[position + 1 :]
    return None


def scan_tokens(
    tokens: Iterable[str], registry: ArgumentRegistry, split_chars: str = "="
) -> Iterator[tuple[ArgumentSpec, str]]:
    """
    Walk ``tokens`` and yield each resolved argument with its raw value.

    The inline ``key<split>value`` form is checked before anything else, so it
    wins even when the key names a flag. Flags always yield ``"true"``.

    Args:
        tokens: The scanning window (program name and final argument excluded).
        registry: Registry used to resolve keys.
        split_chars: Characters that separate an inline key from its value.

    Yields:
        tuple[ArgumentSpec, str]: The resolved spec and its raw string value.

    Raises:
        UnknownArgument: If a key does not resolve.
        MissingValue: If the last token is a key still waiting for its value.
    """
    pending_key: Optional[str] = None
    pending_spec: Optional[ArgumentSpec] = None

    for token in tokens:
        logger.debug("Handling %s", token)

        if pending_spec is not None:
            logger.debug("Got: (%s) -> (%s)", pending_key, token)
            yield pending_spec, token
            pending_key, pending_spec = None, None
            continue

        inline = split_token(token, split_chars)
        if inline is not None:
            key, value = inline
            spec = registry.lookup(key)
            if spec.is_flag:
                value = FLAG_PRESENT
            logger.debug("Got: (%s) -> (%s)", key, value)
            yield spec, value
            continue

        spec = registry.lookup(token)
        if spec.is_flag:
            logger.debug("Got: (%s) -> (%s)", token, FLAG_PRESENT)
            yield spec, FLAG_PRESENT
        else:
            pending_key, pending_spec = token, spec

    if pending_key is not None:
        raise MissingValue(pending_key)


__all__ = ["split_token", "scan_tokens", "FLAG_PRESENT", "FLAG_ABSENT"]
