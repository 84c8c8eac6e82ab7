import json
import os

import jsonschema

from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = os.path.join("~", ".ecsgo.json")


class ConfigLoader:
    DEFAULTS = {
        "command": "/bin/sh",
        "plugin": "session-manager-plugin",
        "log_level": "WARNING",
    }

    SCHEMA = {
        "type": "object",
        "properties": {
            "profile": {"type": "string"},
            "region": {"type": "string"},
            "command": {"type": "string", "minLength": 1},
            "plugin": {"type": "string", "minLength": 1},
            "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
        },
        "additionalProperties": False,
    }

    def __init__(self, config_path=None):
        # An explicitly given file has to exist, the default one is optional
        self.explicit = config_path is not None
        self.config_path = os.path.expanduser(config_path or DEFAULT_CONFIG_PATH)

    def validate_schema(self, config):
        try:
            jsonschema.validate(instance=config, schema=self.SCHEMA)
        except jsonschema.exceptions.ValidationError as e:
            raise ConfigError(f"Configuration validation failed: {e.message}")

    def read_file(self):
        if not os.path.exists(self.config_path):
            if self.explicit:
                raise ConfigError(f"Configuration file not found: {self.config_path}")
            return {}

        with open(self.config_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Failed to parse JSON config: {e}")

    def fold_defaults(self, config, overrides=None):
        """Merge defaults, file values and non-empty overrides, in that order."""
        merged = dict(self.DEFAULTS)
        merged.update(config)
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value
        return merged

    def load_config(self, overrides=None):
        """Load the settings file and apply command line overrides."""
        config = self.read_file()
        self.validate_schema(config)
        return self.fold_defaults(config, overrides)
