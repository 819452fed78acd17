from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .models import StoreConfig
from .registry import PropertyRegistry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(config: StoreConfig) -> None:
    numeric_level = getattr(logging, config.log_level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.handlers.clear()

    # stdout belongs to the console transcript
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    root.setLevel(numeric_level)


def load_config(config_path: Optional[str]) -> StoreConfig:
    if not config_path:
        return StoreConfig()
    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        return StoreConfig(**data)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", config_path)
    except Exception as exc:
        logger.warning("Config load failed (%s); using defaults", exc)
    return StoreConfig()


def build_registry(config: StoreConfig) -> PropertyRegistry:
    """Create the registry and pre-register the configured properties."""
    registry = PropertyRegistry(config.store_name, seed=config.seed_properties)
    logger.info(
        "Storage %r ready with %d predefined properties", registry.name, len(registry)
    )
    return registry


def default_config_path() -> Optional[str]:
    candidate = Path.cwd() / "property_store.yaml"
    return str(candidate) if candidate.exists() else None
