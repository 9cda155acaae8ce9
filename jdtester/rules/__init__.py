"""
Rule groups for the validation engine.

One group per data kind plus the common group that runs for every node.
"""

from typing import Dict

from ..kinds import Kind
from .array import ArrayRules, find_duplicates
from .base import RuleGroup, expect_kind
from .boolean import BooleanRules
from .common import CommonRules
from .mapping import ObjectRules
from .number import NumberRules
from .string import StringRules

__all__ = [
    'RuleGroup', 'CommonRules', 'BooleanRules', 'NumberRules', 'StringRules',
    'ArrayRules', 'ObjectRules', 'KIND_RULE_GROUPS', 'create_rule_groups',
    'expect_kind', 'find_duplicates',
]

KIND_RULE_GROUPS = [BooleanRules, NumberRules, StringRules, ArrayRules, ObjectRules]


def create_rule_groups(engine) -> Dict[Kind, RuleGroup]:
    """
    Instantiate every kind-specific group bound to the given engine.

    Args:
        engine: ValidationEngine the groups report to and recurse through

    Returns:
        Dict mapping each data Kind to the group validating it. Kinds
        without an entry (null, undefined, regex, function, unrecognized)
        only get the common rules.
    """
    groups = {}
    for group_class in KIND_RULE_GROUPS:
        group = group_class(engine)
        groups[group.applies_to()] = group
    return groups
