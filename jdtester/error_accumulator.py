import logging
from typing import Any, Dict, Iterator, List

logger = logging.getLogger(__name__)


class ErrorAccumulator:
    """Ordered, append-only store of validation findings for one pass"""

    def __init__(self):
        self._records: List[Dict[str, Any]] = []

    def reset(self) -> None:
        """Drop the findings of the previous pass."""
        self._records = []

    def push(self, error: str, path: str, value: Any, expected: Any) -> None:
        """
        Record a validation finding.

        Args:
            error: Human-readable description of the failed check
            path: Dot/bracket path to the data particle
            value: The offending data particle (or a summary of it)
            expected: The test that failed
        """
        logger.debug(f"{path}: {error}")
        self._records.append(
            {
                "path": path,
                "error": error,
                "value": value,
                "expected": expected,
            }
        )

    @property
    def records(self) -> List[Dict[str, Any]]:
        """Findings in traversal order (a copy of the list)."""
        return list(self._records)

    @property
    def is_valid(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(list(self._records))
