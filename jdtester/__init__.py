"""
jdtester: schema-driven structural validation of JSON-like data

This library provides:
- Recursive validation of decoded JSON values against loosely-typed schemas
- Schema fields that are literals or functions of the data being checked
- Generator schemas chosen from the data (e.g. on a discriminator field)
- Complete, ordered finding reports with DATA.key[index] paths
- A deep diff splitting two values into left-only, right-only and common parts

Example:
    from jdtester import JDTester

    tester = JDTester({"type": "number", "min": 0, "max": 10})
    errors = tester.test(15)
    # [{"path": "DATA", "error": "Max value validation failed",
    #   "value": 15, "expected": 10}]
"""

from . import common
from .api import JDTester
from .diff import diff
from .error_accumulator import ErrorAccumulator
from .exceptions import ConfigurationError, DiffError, SchemaError
from .kinds import UNDEFINED, Kind, classify
from .resolver import resolve

__version__ = "0.5.0"
__all__ = [
    "JDTester",
    "diff",
    "common",
    "Kind",
    "classify",
    "resolve",
    "UNDEFINED",
    "ConfigurationError",
    "SchemaError",
    "DiffError",
    "ErrorAccumulator",
]
