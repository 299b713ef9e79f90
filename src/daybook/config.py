"""Configuration management for Daybook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.tasks import TaskScope

logger = logging.getLogger(__name__)

DAYBOOK_HOME = Path(os.environ.get("DAYBOOK_HOME", Path.home() / "daybook"))
CONFIG_FILE = DAYBOOK_HOME / "config" / "daybook.conf"
DATA_DIR = DAYBOOK_HOME / "data"


class ConfigError(Exception):
    """Raised when a configuration value can't be used."""

    pass


@dataclass
class Config:
    """Daybook configuration."""

    timezone: str = "America/Toronto"
    data_file: str = ""
    task_scope: TaskScope = TaskScope.ALL

    def tzinfo(self) -> ZoneInfo:
        """Reference time zone for day windows."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown timezone: {self.timezone!r}") from e

    def data_path(self) -> Path:
        """Resolve the record file from config."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "records.json"


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybook.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "timezone":
                config.timezone = value
            case "data_file":
                config.data_file = value
            case "task_scope":
                try:
                    config.task_scope = TaskScope(value.lower())
                except ValueError:
                    logger.warning(f"Unknown TASK_SCOPE {value!r}, using 'all'")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
