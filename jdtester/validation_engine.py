import logging
import time
from typing import Any, Dict, List, Optional

from .error_accumulator import ErrorAccumulator
from .exceptions import SchemaError
from .kinds import UNDEFINED, Kind, classify
from .rules import CommonRules, create_rule_groups

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Recursive schema walk, independent of the public front door"""

    def __init__(self, schema: Any, options: Optional[Dict[str, Any]] = None):
        """
        Initialize validation engine with a root schema node.

        Args:
            schema: Root descriptor (dict) or generator function
            options: Merged tester options (see ConfigLoader)
        """
        self.schema = schema
        self.options = options or {}
        self.root_path = self.options.get("root_path", "DATA")

        self.errors = ErrorAccumulator()
        self.common_rules = CommonRules(self)
        self.rule_groups = create_rule_groups(self)

    def run(self, data: Any = UNDEFINED) -> List[Dict[str, Any]]:
        """
        Validate data against the root schema in one depth-first pass.

        Args:
            data: The data to validate (UNDEFINED when absent)

        Returns:
            Findings in traversal order, each a dict with path, error,
            value and expected keys. Empty when the data is valid.

        Raises:
            SchemaError: If the schema is malformed
        """
        self.errors.reset()

        logger.debug(f"Validation pass started at {self.root_path}")
        start = time.time()

        self.recursive_test(data, self.schema, self.root_path)

        elapsed_ms = round((time.time() - start) * 1000, 2)
        logger.debug(
            f"Validation pass finished: {len(self.errors)} finding(s) in {elapsed_ms}ms"
        )

        return self.errors.records

    def recursive_test(self, data: Any, schema: Any, path: str) -> None:
        """
        Test one data particle against its schema node, then its children.

        A generator function is called once with the data; whatever it
        returns must be a descriptor.

        Args:
            data: Data particle to be tested
            schema: Descriptor or generator for the particle
            path: Dot/bracket path to the particle
        """
        schema_kind = classify(schema)

        if schema_kind is Kind.FUNCTION:
            schema = schema(data)
            schema_kind = classify(schema)
            if schema_kind is not Kind.OBJECT:
                raise SchemaError(
                    f"Schema generator at {path} returned {schema_kind.value}; "
                    "expected object",
                    expected=[Kind.OBJECT.value],
                    received=schema_kind.value,
                )

        if schema_kind is not Kind.OBJECT:
            raise SchemaError(
                "Provided schema is of invalid type. Expected object or function. "
                f"Got {schema_kind.value}",
                expected=[Kind.OBJECT.value, Kind.FUNCTION.value],
                received=schema_kind.value,
            )

        if not self.common_rules.run(data, schema, path):
            return

        group = self.rule_groups.get(classify(data))
        if group:
            group.run(data, schema, path)
