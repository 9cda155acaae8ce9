"""Object rules: strict key set and per-property sub-schemas."""

from typing import Any, Mapping, Optional

from ..kinds import UNDEFINED, Kind
from .base import RuleGroup, expect_kind


def keys_match(data: Mapping[str, Any], keys) -> bool:
    """True if the mapping has exactly the given keys, each listed once."""
    if len(data) != len(keys):
        return False
    return set(keys) == set(data)


class ObjectRules(RuleGroup):
    """Validates plain mappings and recurses into their properties."""

    def applies_to(self) -> Optional[Kind]:
        return Kind.OBJECT

    def run(self, data: Mapping[str, Any], schema: Mapping[str, Any], path: str) -> None:
        strict_keys = self.field(schema, "strictKeys", data)
        data_schema = self.field(schema, "data", data)

        if strict_keys is not None:
            expect_kind("strictKeys", strict_keys, "Array", Kind.ARRAY)
            for index, key in enumerate(strict_keys):
                expect_kind(
                    f"strictKeys[{index}]", key, "String or Number",
                    Kind.STRING, Kind.NUMBER,
                )
            if not keys_match(data, strict_keys):
                self.report(
                    "Strict keys validation failed. Missing or additional keys were found",
                    path,
                    list(data.keys()),
                    strict_keys,
                )

        if data_schema is not None:
            expect_kind("data", data_schema, "Object", Kind.OBJECT)
            # Properties missing from the data are still visited so that
            # their own "required" rule can fire.
            for key, property_schema in data_schema.items():
                self.engine.recursive_test(
                    data.get(key, UNDEFINED), property_schema, f"{path}.{key}"
                )
