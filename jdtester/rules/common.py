"""
Common rules: presence, type, nullability and custom predicate.

Evaluated for every descriptor before the kind-specific group runs.
"""

from typing import Any, Mapping, Optional

from ..exceptions import SchemaError
from ..kinds import UNDEFINED, Kind, classify
from .base import RuleGroup, expect_kind


class CommonRules(RuleGroup):
    """Checks shared by every schema node."""

    def applies_to(self) -> Optional[Kind]:
        return None

    def run(self, data: Any, schema: Mapping[str, Any], path: str) -> bool:
        """
        Execute the common rules.

        Returns:
            False when the node is optional and the data is absent, meaning
            no further check applies to this node; True otherwise
        """
        type_ = self.field(schema, "type", data)
        can_be_null = self.field(schema, "canBeNull", data, False)
        required = self.field(schema, "required", data, True)
        fn = schema.get("fn")

        if required is not None:
            expect_kind("required", required, "Boolean", Kind.BOOLEAN)

        if data is UNDEFINED:
            if not required:
                return False
            self.report(
                "Required validation failed",
                path,
                data,
                type_ if type_ is not None else "not undefined",
            )

        if type_ is not None:
            self._test_type(type_, can_be_null, path, data)

        if can_be_null is not None:
            expect_kind("canBeNull", can_be_null, "Boolean", Kind.BOOLEAN)
            if can_be_null is False and data is None:
                self.report(
                    "Value cannot be null",
                    path,
                    data,
                    type_ if type_ is not None else "not null",
                )

        if fn is not None:
            expect_kind("fn", fn, "Function", Kind.FUNCTION)
            if fn(data) is False:
                self.report("fn() validation failed", path, data, fn)

        return True

    def _test_type(self, type_: Any, can_be_null: Any, path: str, data: Any) -> None:
        """Check the data's kind against a kind name or a list of kind names."""
        expect_kind("type", type_, "String or Array", Kind.STRING, Kind.ARRAY)

        if classify(type_) is Kind.ARRAY:
            for entry in type_:
                if classify(entry) is not Kind.STRING:
                    raise SchemaError(
                        f'String expected for "type" array entry. Got {classify(entry).value}',
                        field="type",
                        expected=[Kind.STRING.value],
                        received=classify(entry).value,
                    )
            allowed = list(type_)
        else:
            allowed = [type_]

        data_kind = classify(data)

        if can_be_null is True and data_kind is Kind.NULL:
            return

        if data_kind not in allowed:
            self.report("Type validation failed", path, data, type_)
