"""Option loading: bundled defaults merged with caller overrides."""

import logging
from importlib.resources import files
from typing import Any, Dict, Optional

import yaml
from jsonschema import ValidationError, validate

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

OPTIONS_SCHEMA = {
    "type": "object",
    "properties": {
        "break_on_error": {"type": "boolean"},
        "root_path": {"type": "string", "minLength": 1},
    },
    "required": ["break_on_error", "root_path"],
}

# camelCase spellings accepted for the snake_case option names
OPTION_ALIASES = {
    "breakOnError": "break_on_error",
    "rootPath": "root_path",
}


class ConfigLoader:
    """Handles tester options: bundled default-config.yaml + caller overrides."""

    DEFAULT_CONFIG = "default-config.yaml"

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Load defaults and apply overrides.

        Args:
            options: Caller options (may be None or empty)

        Raises:
            ConfigurationError: If the merged options are invalid
        """
        config_file = files("jdtester").joinpath(self.DEFAULT_CONFIG)
        with config_file.open("r") as f:
            self.defaults = yaml.safe_load(f) or {}

        if options is not None and not isinstance(options, dict):
            raise ConfigurationError(
                f"Options must be a dict, got {type(options).__name__}"
            )

        overrides = dict(options or {})
        for alias, name in OPTION_ALIASES.items():
            if alias in overrides:
                value = overrides.pop(alias)
                overrides.setdefault(name, value)

        unknown = [key for key in overrides if key not in OPTIONS_SCHEMA["properties"]]
        if unknown:
            logger.debug(f"Ignoring unknown options: {unknown}")

        self.options = {**self.defaults, **overrides}

        try:
            validate(instance=self.options, schema=OPTIONS_SCHEMA)
        except ValidationError as e:
            option_path = ".".join(str(p) for p in e.path) if e.path else "options"
            raise ConfigurationError(
                f"Invalid option at {option_path}: {e.message}"
            ) from e

        if self.options["break_on_error"]:
            logger.debug(
                "break_on_error is reserved; every finding is still reported"
            )

    def get_options(self) -> Dict[str, Any]:
        """Get the merged options."""
        return dict(self.options)

    def get_root_path(self) -> str:
        return self.options["root_path"]

    def get_break_on_error(self) -> bool:
        return self.options["break_on_error"]
