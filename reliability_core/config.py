"""YAML configuration and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .data import DEFAULT_DATA_PATH
from .engine import DEFAULT_TIME
from .models import Topology
from .validation import ReliabilityError, parse_topology

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(ReliabilityError):
    """Raised when the configuration file is malformed."""


@dataclass(frozen=True)
class ComponentSheetSettings:
    """Where component failure rates are read from."""

    path: Optional[Path] = None
    delimiter: str = ";"
    col_name_comp_id: str = "code"
    col_name_lambda: str = "lambda"


@dataclass(frozen=True)
class Settings:
    """Runtime settings; every value has a default."""

    default_time: float = DEFAULT_TIME
    topology: Topology = Topology.SERIES
    components: ComponentSheetSettings = field(default_factory=ComponentSheetSettings)
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "INFO"


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    """Read settings from ``path`` (``config.yaml`` by default).

    A missing file yields the defaults; an explicitly requested file that does
    not exist is an error.
    """

    explicit = path is not None
    path = Path(path) if explicit else DEFAULT_CONFIG_PATH
    if not path.exists():
        if explicit:
            raise ConfigError(f"Configuration file \"{path}\" does not exist.")
        logger.debug("No configuration file at %s, using defaults", path)
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read configuration \"{path}\". Error: {exc}") from exc

    if not isinstance(config, Mapping):
        raise ConfigError(f"{path}: top level must be a mapping.")
    return settings_from_mapping(config, source=str(path))


def settings_from_mapping(config: Mapping[str, Any], source: str = "config") -> Settings:
    """Build :class:`Settings` from an already parsed configuration mapping."""

    reliability_cfg = _section(config, "reliability", source)
    components_cfg = _section(config, "components", source)
    data_cfg = _section(config, "data", source)
    logging_cfg = _section(config, "logging", source)

    defaults = Settings()
    sheet_defaults = ComponentSheetSettings()

    default_time = reliability_cfg.get("default_time", defaults.default_time)
    try:
        default_time = float(default_time)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: reliability.default_time must be numeric, got {default_time!r}.")

    topology = parse_topology(reliability_cfg.get("topology", defaults.topology))

    sheet_path = components_cfg.get("path")
    components = ComponentSheetSettings(
        path=Path(sheet_path) if sheet_path else None,
        delimiter=str(components_cfg.get("delimiter", sheet_defaults.delimiter)),
        col_name_comp_id=str(components_cfg.get("col_name_comp_id", sheet_defaults.col_name_comp_id)),
        col_name_lambda=str(components_cfg.get("col_name_lambda", sheet_defaults.col_name_lambda)),
    )

    level = str(logging_cfg.get("level", defaults.log_level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{source}: unknown logging level {level!r}.")

    return Settings(
        default_time=default_time,
        topology=topology,
        components=components,
        data_path=Path(data_cfg.get("path", defaults.data_path)),
        log_level=level,
    )


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Route package log records to stderr at ``level``."""

    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown logging level {level!r}.")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("reliability_core").setLevel(level)


def _section(config: Mapping[str, Any], name: str, source: str) -> Dict[str, Any]:
    value = config.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{source}: section '{name}' must be a mapping.")
    return dict(value)
