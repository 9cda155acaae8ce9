"""Boolean rules: exact value match."""

from typing import Any, Mapping, Optional

from ..kinds import Kind
from .base import RuleGroup, expect_kind


class BooleanRules(RuleGroup):
    """Validates boolean data particles."""

    def applies_to(self) -> Optional[Kind]:
        return Kind.BOOLEAN

    def run(self, data: bool, schema: Mapping[str, Any], path: str) -> None:
        value = self.field(schema, "value", data)

        if value is not None:
            expect_kind("value", value, "Boolean", Kind.BOOLEAN)
            if data != value:
                self.report("Value validation failed", path, data, value)
