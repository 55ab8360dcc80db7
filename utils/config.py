# utils/config.py
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml

from common.constants import DEFAULT_FILENAME_TEMPLATE

log = structlog.get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "output_dir": ".",
    "filename_template": DEFAULT_FILENAME_TEMPLATE,
    "log_level": "INFO",
}


def load_yaml_config(config_path: Path, config_name: str) -> Dict[str, Any]:
    """Loads a generic YAML configuration file."""
    if not config_path.is_file():
        log.error(f"{config_name} config file not found", path=str(config_path))
        raise FileNotFoundError(
            f"{config_name} configuration file not found: {config_path}"
        )
    try:
        with config_path.open("r") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(
            f"Error parsing YAML for {config_name}",
            path=str(config_path),
            error=str(e),
        )
        raise
    if config_data is None:
        log.warning(f"{config_name} config file is empty.", path=str(config_path))
        return {}
    if not isinstance(config_data, dict):
        raise ValueError(f"{config_name} config must be a mapping: {config_path}")
    log.debug(f"{config_name} config loaded", path=str(config_path))
    return config_data


def load_settings(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Defaults overlaid with the YAML config (``config/config.yaml`` if unset)."""
    settings = dict(DEFAULTS)
    settings.update(load_yaml_config(config_path or CONFIG_FILE, "Main"))
    unknown = set(settings) - set(DEFAULTS)
    if unknown:
        log.warning("Ignoring unknown config keys", keys=sorted(unknown))
        for key in unknown:
            settings.pop(key)
    return settings
