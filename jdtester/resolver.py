"""Resolution of schema fields that may be literals or functions of the data."""

from typing import Any


def resolve(field: Any, data: Any, default: Any = None) -> Any:
    """
    Resolve a schema field against the current data particle.

    A callable field is invoked with the data and its result returned as is;
    the default only applies to literal fields that were not provided.

    Args:
        field: Literal value, None (not provided) or a one-argument callable
        data: Data particle at the current path
        default: Value used when a literal field was not provided

    Returns:
        The concrete test value

    Example:
        resolve(lambda d: len(d["items"]), {"items": [1, 2]})  # -> 2
        resolve(None, 15, default=True)                          # -> True
    """
    if callable(field):
        return field(data)

    if field is None and default is not None:
        return default

    return field
