"""String rules: regular expression pattern and exact value."""

from typing import Any, Mapping, Optional

from ..kinds import Kind
from .base import RuleGroup, expect_kind


class StringRules(RuleGroup):
    """Validates string data particles."""

    def applies_to(self) -> Optional[Kind]:
        return Kind.STRING

    def run(self, data: str, schema: Mapping[str, Any], path: str) -> None:
        pattern = self.field(schema, "pattern", data)
        value = self.field(schema, "value", data)

        if pattern is not None:
            expect_kind("pattern", pattern, "RegExp object", Kind.REGEX)
            # search, not match: the pattern may hit anywhere unless anchored
            if pattern.search(data) is None:
                self.report("Pattern validation failed", path, data, pattern)

        if value is not None:
            expect_kind("value", value, "String", Kind.STRING)
            if data != value:
                self.report("Value validation failed", path, data, value)
