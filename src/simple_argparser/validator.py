"""
Post-parse validation.

After scanning, every registered argument must end up with exactly one result
entry: mandatory arguments must have been provided, missing flags are recorded
as ``"false"`` and missing optional values as the empty string.
"""

from .exceptions import MissingArgument
from .logger import logger
from .registry import ArgumentRegistry
from .results import ResultSet
from .tokenizer import FLAG_ABSENT


def finalize_results(registry: ArgumentRegistry, results: ResultSet) -> ResultSet:
    """
    Check mandatory arguments and fill in defaults for missing optional ones.

    Specs are visited in registration order; entries produced by scanning are
    left untouched.

    Args:
        registry: The registry holding the declared arguments.
        results: The result set populated by scanning.

    Returns:
        ResultSet: ``results``, completed in place.

    Raises:
        MissingArgument: For the first mandatory argument without an entry.
    """
    for spec in registry:
        if spec.name in results:
            continue
        if spec.is_mandatory:
            raise MissingArgument(spec.name)
        if spec.is_flag:
            logger.debug("Flag %s not given, recording %s", spec.name, FLAG_ABSENT)
            results.add(spec, FLAG_ABSENT)
        else:
            logger.debug("Optional argument %s not given, recording empty value", spec.name)
            results.add(spec, "")
    return results


__all__ = ["finalize_results"]
