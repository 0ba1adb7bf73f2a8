"""
Argument checks and the filter‑then‑encode helper used by the request builders.
"""

from typing import Any, Iterable, List, Tuple

from lang_translation_lib.exceptions import InvalidArgumentError


def is_empty(value: Any) -> bool:
    """``None`` and empty strings count as absent; ``False`` and ``0`` do not."""
    return value is None or (isinstance(value, (str, bytes)) and len(value) == 0)


def not_empty(value: Any, message: str) -> Any:
    """
    Return ``value`` unchanged or raise :class:`InvalidArgumentError`.

    Parameters
    ----------
    value : Any
        Argument to check.
    message : str
        Error message used when ``value`` is ``None`` or an empty string.
    """
    if is_empty(value):
        raise InvalidArgumentError(message)
    return value


def drop_empty(pairs: Iterable[Tuple[str, Any]]) -> List[Tuple[str, Any]]:
    """Keep the ``(key, value)`` pairs whose value is present, in input order."""
    return [(key, value) for key, value in pairs if not is_empty(value)]


def encode_query_value(value: Any) -> str:
    """Query strings carry booleans as ``true`` / ``false``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
