import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from plugpipe.settings.models import Settings

SETTINGS_ENV_VAR = "PLUGPIPE_CONFIG"
DEFAULT_SETTINGS_FILE = "pipeline.yaml"


def default_settings_path() -> Path:
    """Settings path from PLUGPIPE_CONFIG, else ./pipeline.yaml."""
    return Path(os.environ.get(SETTINGS_ENV_VAR, DEFAULT_SETTINGS_FILE)).resolve()


def load_settings(path: Path | None = None) -> Settings:
    """
    Load and validate the settings file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if path is None:
        path = default_settings_path()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Settings validation failed:\n{e}") from e
