"""
Public API for jdtester

This is the "front door" - the main entry point for validation and diffing.
"""

import logging
from typing import Any, Dict, List, Optional

from . import common as common_schemas
from .config_loader import ConfigLoader
from .diff import diff as recursive_diff
from .kinds import UNDEFINED
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


class JDTester:
    """
    Main validator class.

    Owns one schema and the findings of its most recent test() call.

    Schema descriptors are plain dicts. Recognized fields:
        Every node: type, required, canBeNull, fn
        boolean:    value
        number:     min, max, value
        string:     pattern, value
        array:      minLength, maxLength, allowDuplicates, elements
        object:     strictKeys, data

    Any field except fn may be a function of the data particle at that
    node. A whole node may also be a function returning a descriptor.

    Example:
        from jdtester import JDTester

        tester = JDTester({
            "type": "object",
            "strictKeys": ["kind", "size"],
            "data": lambda item: {
                "kind": {"type": "string"},
                "size": {
                    "type": "number",
                    "max": 10 if item.get("kind") == "small" else 100,
                },
            },
        })

        for error in tester.test({"kind": "small", "size": 42}):
            print(f"{error['path']}: {error['error']}")
    """

    # Shared library of reusable schema fragments
    common = common_schemas

    def __init__(self, schema: Any, options: Optional[Dict[str, Any]] = None):
        """
        Initialize a validator.

        Args:
            schema: Root schema node (descriptor dict or generator function)
            options: Optional settings merged over default-config.yaml:
                - break_on_error: reserved, accepted but not acted on
                - root_path: prefix of reported paths (default "DATA")

        Raises:
            ConfigurationError: If the options are invalid
        """
        self.schema = schema
        self.config_loader = ConfigLoader(options)
        self.options = self.config_loader.get_options()
        self.engine = ValidationEngine(schema, self.options)
        self.errors: List[Dict[str, Any]] = []

    def test(self, data: Any = UNDEFINED) -> List[Dict[str, Any]]:
        """
        Validate data against the schema.

        Findings from any previous call are discarded first.

        Args:
            data: Decoded JSON-like value (UNDEFINED for "absent")

        Returns:
            List of finding dicts, each containing:
                - path: Dot/bracket path, e.g. "DATA.items[2].id"
                - error: Description, e.g. "Type validation failed"
                - value: The offending data particle
                - expected: The test that failed
            The same list is kept on self.errors. Empty means valid.

        Raises:
            SchemaError: If the schema is malformed
        """
        self.errors = self.engine.run(data)
        return self.errors

    def is_valid(self) -> bool:
        """True if the last test() call produced no findings."""
        return not self.errors

    diff = staticmethod(recursive_diff)
