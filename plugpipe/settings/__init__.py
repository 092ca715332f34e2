from plugpipe.settings.loader import default_settings_path, load_settings
from plugpipe.settings.models import Settings

__all__ = ["Settings", "default_settings_path", "load_settings"]
