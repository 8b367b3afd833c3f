"""Logging setup for the API process and scripts."""
from __future__ import annotations

import logging.config
from pathlib import Path

import yaml

from ballot_registry.core.config import Settings

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "logging.yaml"


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the YAML dictConfig, then the optional ``log_level`` override.

    ``BALLOT_LOGGING_CONFIG_PATH`` points at another YAML file; without any
    file the root logger falls back to ``basicConfig`` at INFO.
    """
    config_path = DEFAULT_CONFIG_PATH
    if settings is not None and settings.logging_config_path is not None:
        config_path = settings.logging_config_path

    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as config_file:
            logging.config.dictConfig(yaml.safe_load(config_file))
    else:
        logging.basicConfig(level=logging.INFO)

    if settings is not None and settings.log_level:
        logging.getLogger("ballot_registry").setLevel(settings.log_level.upper())


__all__ = ["DEFAULT_CONFIG_PATH", "configure_logging"]
