"""
Array rules: length bounds, duplicate detection and element schemas.

allowDuplicates has three modes besides the default True:
- False: the data array itself must not contain repeated primitives
- an array: that externally supplied array must not contain repeated
  primitives (useful for uniqueness across sibling fields)
- a mapping of name -> function: each function projects the data array
  into a list that must not contain repeated primitives, e.g.
  {"id": lambda items: [item["id"] for item in items]}
"""

from typing import Any, List, Mapping, Optional, Sequence

from ..exceptions import SchemaError
from ..kinds import PRIMITIVE_KINDS, UNDEFINED, Kind, classify
from .base import RuleGroup, expect_kind

DUPLICATES_ERROR = "Duplicate values validation failed"


def find_duplicates(values: Sequence[Any]) -> List[Any]:
    """
    Return every primitive value occurring more than once, in first-seen order.

    Values are grouped by kind and value, so 1 and True are distinct.

    Raises:
        SchemaError: If the sequence holds a non-primitive value
    """
    counts = {}
    for item in values:
        kind = classify(item)
        if kind not in PRIMITIVE_KINDS:
            raise SchemaError(
                "Can only test for duplicates on array containing only primitive "
                "values. Use function to provide compatible values",
                field="allowDuplicates",
                expected=sorted(k.value for k in PRIMITIVE_KINDS),
                received=kind.value,
            )
        key = (kind, item)
        counts[key] = counts.get(key, 0) + 1

    return [item for (_, item), count in counts.items() if count > 1]


def format_duplicates(duplicates: List[Any]) -> str:
    """Render duplicates as [a,b,c] using JSON spelling for null and booleans."""
    rendered = []
    for item in duplicates:
        if item is UNDEFINED:
            rendered.append("undefined")
        elif item is None:
            rendered.append("null")
        elif isinstance(item, bool):
            rendered.append("true" if item else "false")
        else:
            rendered.append(str(item))
    return "[" + ",".join(rendered) + "]"


class ArrayRules(RuleGroup):
    """Validates array data particles and recurses into their elements."""

    def applies_to(self) -> Optional[Kind]:
        return Kind.ARRAY

    def run(self, data: Sequence[Any], schema: Mapping[str, Any], path: str) -> None:
        min_length = self.field(schema, "minLength", data)
        max_length = self.field(schema, "maxLength", data)
        allow_duplicates = self.field(schema, "allowDuplicates", data, True)
        elements_schema = self.field(schema, "elements", data)

        if min_length is not None:
            expect_kind("minLength", min_length, "Number", Kind.NUMBER)
            if len(data) < min_length:
                self.report("Minimum length validation failed", path, data, min_length)

        if max_length is not None:
            expect_kind("maxLength", max_length, "Number", Kind.NUMBER)
            if len(data) > max_length:
                self.report("Maximum length validation failed", path, data, max_length)

        if allow_duplicates is not None and allow_duplicates is not True:
            self._test_duplicates(allow_duplicates, data, path)

        if elements_schema is not None:
            for index, element in enumerate(data):
                self.engine.recursive_test(element, elements_schema, f"{path}[{index}]")

    def _test_duplicates(self, allow_duplicates: Any, data: Sequence[Any], path: str) -> None:
        mode = classify(allow_duplicates)

        if allow_duplicates is False:
            duplicates = find_duplicates(data)
            if duplicates:
                self.report(
                    f"{DUPLICATES_ERROR}. Duplicates: {format_duplicates(duplicates)}",
                    path,
                    data,
                    False,
                )

        elif mode is Kind.ARRAY:
            duplicates = find_duplicates(allow_duplicates)
            if duplicates:
                self.report(
                    f"{DUPLICATES_ERROR}. Duplicates: {format_duplicates(duplicates)}",
                    path,
                    allow_duplicates,
                    False,
                )

        elif mode is Kind.OBJECT:
            # The finding carries the projection itself as its value, unlike
            # the other two modes which carry the scanned array.
            for key, projection in allow_duplicates.items():
                expect_kind(
                    f"allowDuplicates.{key}", projection, "Function", Kind.FUNCTION
                )
                projected = projection(data)
                expect_kind(
                    f"allowDuplicates.{key}() result", projected, "Array", Kind.ARRAY
                )
                duplicates = find_duplicates(projected)
                if duplicates:
                    self.report(
                        f'{DUPLICATES_ERROR}. Duplicates for "{key}": '
                        f"{format_duplicates(duplicates)}",
                        path,
                        projection,
                        False,
                    )

        else:
            raise SchemaError(
                'Boolean, array or object expected for "allowDuplicates" value. '
                f"Got {mode.value}",
                field="allowDuplicates",
                expected=[Kind.BOOLEAN.value, Kind.ARRAY.value, Kind.OBJECT.value],
                received=mode.value,
            )
