"""
Deep diff of two JSON-like values.

Splits a pair of mappings (or a pair of lists) into what only the left
side has, what only the right side has, and what both share:

    diff({"a": 1, "b": 2}, {"a": 1, "b": 3})
    # -> {"leftDiff": {"b": 2}, "rightDiff": {"b": 3}, "common": {"a": 1}}

Index positions of list results are preserved; positions with nothing to
report hold UNDEFINED:

    diff([1, 2], [1, 3])
    # -> {"leftDiff": [UNDEFINED, 2], "rightDiff": [UNDEFINED, 3], "common": [1]}
"""

from typing import Any, Dict, Optional

from .exceptions import DiffError
from .kinds import CONTAINER_KINDS, PRIMITIVE_KINDS, UNDEFINED, Kind, classify


def diff(left: Any, right: Any) -> Dict[str, Any]:
    """
    Compare two values recursively.

    Args:
        left: Left value
        right: Right value

    Returns:
        Dict with leftDiff, rightDiff and common keys. Each is None
        when there is nothing to report on that side. When the two values
        are not both mappings or both lists, they are returned whole as
        leftDiff / rightDiff with common None.

    Raises:
        DiffError: If both values are the same composite kind other than
            mapping or list (e.g. two compiled patterns)
    """
    left_kind = classify(left)
    right_kind = classify(right)

    if left_kind is right_kind and left_kind not in CONTAINER_KINDS:
        if left_kind not in PRIMITIVE_KINDS:
            raise DiffError(
                f"Only arrays and plain objects are allowed, got two {left_kind.value} values"
            )

    if left_kind is not right_kind or left_kind not in CONTAINER_KINDS:
        return {"leftDiff": _detach(left), "rightDiff": _detach(right), "common": None}

    left_diff = {}
    right_diff = {}
    common = {}

    left_keys = _keys(left, left_kind)
    right_keys = _keys(right, right_kind)

    for key in left_keys:
        value_left = left[key]

        if key not in right_keys:
            left_diff[key] = _detach(value_left)
            continue

        value_right = right[key]
        kind_left = classify(value_left)
        kind_right = classify(value_right)

        if kind_left is not kind_right:
            left_diff[key] = _detach(value_left)
            right_diff[key] = _detach(value_right)

        elif kind_left in CONTAINER_KINDS:
            result = diff(value_left, value_right)
            if result["leftDiff"] is not None:
                left_diff[key] = result["leftDiff"]
            if result["rightDiff"] is not None:
                right_diff[key] = result["rightDiff"]
            if result["common"] is not None:
                common[key] = result["common"]

        elif _same_leaf(value_left, value_right, kind_left):
            common[key] = value_left

        else:
            left_diff[key] = _detach(value_left)
            right_diff[key] = _detach(value_right)

    for key in right_keys:
        if key not in left_keys:
            right_diff[key] = _detach(right[key])

    return {
        "leftDiff": _build(left_diff, left_kind),
        "rightDiff": _build(right_diff, left_kind),
        "common": _build(common, left_kind),
    }


def _keys(container: Any, kind: Kind):
    """Key view with constant-time membership (a range for lists)."""
    if kind is Kind.ARRAY:
        return range(len(container))
    return container.keys()


def _same_leaf(value_left: Any, value_right: Any, kind: Kind) -> bool:
    """Equality for two non-container values of the same kind."""
    if kind is Kind.FUNCTION:
        return value_left is value_right
    if kind in PRIMITIVE_KINDS:
        return value_left == value_right
    # regex and unrecognized objects: same class and same text
    return type(value_left) is type(value_right) and str(value_left) == str(value_right)


def _build(entries: Dict[Any, Any], kind: Kind) -> Optional[Any]:
    """Turn collected entries into a container shaped like the inputs, or None."""
    if not entries:
        return None
    if kind is Kind.OBJECT:
        return entries
    result = [UNDEFINED] * (max(entries) + 1)
    for index, value in entries.items():
        result[index] = value
    return result


def _detach(value: Any) -> Any:
    """Copy mappings and lists so results never alias the inputs."""
    kind = classify(value)
    if kind is Kind.OBJECT:
        return {key: _detach(item) for key, item in value.items()}
    if kind is Kind.ARRAY:
        return [_detach(item) for item in value]
    return value
