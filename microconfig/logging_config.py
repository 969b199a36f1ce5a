"""
Logging configuration for the microconfig package.

Settings can be given explicitly or read from the environment:
- MICROCONFIG_LOG_LEVEL: root log level (default INFO)
- MICROCONFIG_JSON_LOGS: render JSON lines instead of console output
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Any

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class LoggingConfig:
    """Logging settings applied by `init_logger`."""
    level: str = "INFO"
    json_logs: bool = False
    component_levels: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {self.level}")
        for component, level in self.component_levels.items():
            if level.upper() not in LEVELS:
                raise ValueError(f"Invalid log level for {component}: {level}")

    @classmethod
    def from_env(cls, environ=None) -> "LoggingConfig":
        """Build settings from MICROCONFIG_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            level=environ.get("MICROCONFIG_LOG_LEVEL", "INFO"),
            json_logs=environ.get("MICROCONFIG_JSON_LOGS", "").strip().lower() in _TRUE_VALUES,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'level': self.level,
            'json_logs': self.json_logs,
            'component_levels': dict(self.component_levels),
        }
