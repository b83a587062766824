"""Loading renderer settings from YAML files."""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML
from pydantic import ValidationError

from lxcconfig.models.settings import RendererSettings
from lxcconfig.utils.logging import setup_logging


logger = logging.getLogger(__name__)


def _read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse YAML file."""
    yaml = YAML(typ="safe")
    return yaml.load(file_path.read_text()) or {}


def load_settings(path: Union[str, Path]) -> RendererSettings:
    """Load renderer settings from a YAML file."""
    settings_file = Path(path)
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")

    try:
        data = _read_yaml(settings_file)
        settings = RendererSettings(**data)
        logger.debug(f"Loaded renderer settings: {settings_file}")
        return settings
    except ValidationError as e:
        logger.error(f"Invalid renderer settings: {e}")
        raise


def configure(path: Union[str, Path]) -> RendererSettings:
    """Load renderer settings and apply their log level."""
    settings = load_settings(path)
    setup_logging(settings.log_level)
    logger.info(f"Logging configured at {settings.log_level}")
    return settings
