"""
Abstract base class for rule groups.

A rule group holds every check that applies to one kind of data particle.
The engine injects itself at construction time; groups record findings
through self.engine.errors and recurse through self.engine.recursive_test().
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..exceptions import SchemaError
from ..kinds import Kind, classify
from ..resolver import resolve


def expect_kind(name: str, value: Any, label: str, *kinds: Kind) -> None:
    """
    Raise SchemaError unless a resolved schema field is of one of the given kinds.

    Args:
        name: Schema field name (e.g. "min")
        value: Resolved field value
        label: Human-readable description of the accepted kinds
        kinds: Accepted kinds
    """
    received = classify(value)
    if received not in kinds:
        raise SchemaError(
            f'{label} expected for "{name}" value. Got {received.value}',
            field=name,
            expected=[k.value for k in kinds],
            received=received.value,
        )


class RuleGroup(ABC):
    """
    Abstract base class for all rule groups.

    Every rule in a group follows the same contract: resolve the schema
    field against the data particle, then either pass silently or record
    exactly one finding. A field of the wrong type raises SchemaError.
    """

    def __init__(self, engine):
        """
        Initialize the group with the engine that drives it.

        Args:
            engine: ValidationEngine owning the error accumulator
        """
        self.engine = engine

    @abstractmethod
    def applies_to(self) -> Optional[Kind]:
        """Return the data kind this group validates (None for every kind)."""

    @abstractmethod
    def run(self, data: Any, schema: Mapping[str, Any], path: str) -> Any:
        """
        Execute the group's rules for one data particle.

        Args:
            data: Data particle to be tested
            schema: Descriptor for the particle
            path: Dot/bracket path to the particle
        """

    def field(self, schema: Mapping[str, Any], name: str, data: Any, default: Any = None) -> Any:
        """Resolve a descriptor field against the data particle."""
        return resolve(schema.get(name), data, default)

    def report(self, error: str, path: str, value: Any, expected: Any) -> None:
        """Record a finding on the engine's accumulator."""
        self.engine.errors.push(error, path, value, expected)
