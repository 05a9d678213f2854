"""YAML configuration and logging setup."""

import logging
import os
from typing import Any, Optional

import yaml

from .estimator import EstimatorConfig
from .exceptions import InvalidConfig

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_config(path: str) -> dict[str, Any]:
    """
    Load YAML config file.

    An empty file gives an empty config. Anything but a mapping at the top
    level raises InvalidConfig.
    """
    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise InvalidConfig(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidConfig(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfig(f"Config file {path} must contain a mapping")
    return config


def estimator_config(
    config: dict[str, Any],
    weight_unit: Optional[str] = None,
    length_unit: Optional[str] = None,
) -> EstimatorConfig:
    """Build EstimatorConfig from the `units` section, with overrides."""
    units = dict(config.get("units") or {})
    if weight_unit:
        units["weight_unit"] = weight_unit
    if length_unit:
        units["length_unit"] = length_unit
    return EstimatorConfig.from_dict(units)


def setup_logging(config: dict[str, Any]):
    log_config = config.get("logging") or {}
    level_name = str(log_config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise InvalidConfig(f"Invalid logging level: {level_name}")
    log_format = log_config.get("format", DEFAULT_LOG_FORMAT)

    # Create logs directory if needed
    log_file = log_config.get("file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    handlers: list[logging.Handler] = []
    handlers.append(logging.StreamHandler())  # Console logging

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers,
        force=True,
    )
    logger.debug(f"Logging configured at {level_name}")
