"""Number rules: lower bound, upper bound and exact value."""

from typing import Any, Mapping, Optional

from ..kinds import Kind
from .base import RuleGroup, expect_kind


class NumberRules(RuleGroup):
    """Validates number data particles."""

    def applies_to(self) -> Optional[Kind]:
        return Kind.NUMBER

    def run(self, data: Any, schema: Mapping[str, Any], path: str) -> None:
        min_ = self.field(schema, "min", data)
        max_ = self.field(schema, "max", data)
        value = self.field(schema, "value", data)

        if min_ is not None:
            expect_kind("min", min_, "Number", Kind.NUMBER)
            if data < min_:
                self.report("Min value validation failed", path, data, min_)

        if max_ is not None:
            expect_kind("max", max_, "Number", Kind.NUMBER)
            if data > max_:
                self.report("Max value validation failed", path, data, max_)

        if value is not None:
            expect_kind("value", value, "Number", Kind.NUMBER)
            if data != value:
                self.report("Value validation failed", path, data, value)
