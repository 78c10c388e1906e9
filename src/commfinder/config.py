"""Configuration and settings management for comm-finder"""

import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.exceptions import InvalidLetterError
from .core.lettering import LetteringScheme
from .utils.logging import CommFinderLogger

SETTINGS_FILE = "settings.yaml"


class SettingsManager:
    """Manages comm-finder settings with user override support"""

    def __init__(self):
        # Package data directory (built-in defaults)
        self.package_data_dir = Path(__file__).parent / "data"

        # User data directory (overrides)
        self.user_data_dir = self._get_user_data_dir()

        self.user_data_dir.mkdir(parents=True, exist_ok=True)

    def _get_user_data_dir(self) -> Path:
        """Get user data directory based on OS or environment variable"""
        if custom_dir := os.environ.get("COMMFINDER_DATA_DIR"):
            return Path(custom_dir).expanduser()

        system = platform.system()

        if system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "commfinder"
        elif system == "Windows":
            app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
            return Path(app_data) / "commfinder"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            return Path(xdg_config) / "commfinder"

    @property
    def user_settings_file(self) -> Path:
        return self.user_data_dir / SETTINGS_FILE

    @property
    def log_dir(self) -> Path:
        return self.user_data_dir / "logs"

    def load_settings(self) -> Dict[str, Any]:
        """Package defaults with user values layered on top"""
        settings = self._load_file(self.package_data_dir / SETTINGS_FILE)
        if self.user_settings_file.exists():
            settings.update(self._load_file(self.user_settings_file))
        return settings

    def _load_file(self, filepath: Path) -> Dict[str, Any]:
        try:
            with open(filepath, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            CommFinderLogger.warning(f"Error loading {filepath}: {e}")
            return {}
        if not isinstance(data, dict):
            CommFinderLogger.warning(f"Ignoring {filepath}: expected a mapping")
            return {}
        return data

    def save_user_settings(self, updates: Dict[str, Any]) -> None:
        """Merge values into the user settings file"""
        current = {}
        if self.user_settings_file.exists():
            current = self._load_file(self.user_settings_file)
        current.update(updates)

        with open(self.user_settings_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(current, f, default_flow_style=False, allow_unicode=True)
        CommFinderLogger.info(f"Saved to {self.user_settings_file}")

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_settings().get(key, default)

    @property
    def dataset_url(self) -> str:
        return os.environ.get("COMMFINDER_DATASET_URL") or str(self.get("dataset_url", ""))

    @property
    def timeout(self) -> float:
        return float(self.get("timeout", 30))

    def get_lettering(self) -> Optional[LetteringScheme]:
        """Stored lettering scheme, or None for canonical lettering

        A stored value is used exactly as written; anything that is not 24
        distinct uppercase letters is ignored.
        """
        value = self.get("lettering")
        if value is None or value == "":
            return None
        try:
            return LetteringScheme(value)
        except InvalidLetterError as e:
            CommFinderLogger.warning(f"Ignoring stored lettering {value!r}: {e}")
            return None

    def save_lettering(self, value: Optional[str]) -> Optional[LetteringScheme]:
        """Validate and store a lettering scheme; empty clears it

        Raises:
            InvalidLetterError: the value is not 24 distinct uppercase letters
        """
        scheme = LetteringScheme.from_value(value)
        self.save_user_settings({"lettering": scheme.letters if scheme else ""})
        return scheme

    def reset_to_defaults(self) -> bool:
        """Remove user settings; returns whether there was anything to remove"""
        if self.user_settings_file.exists():
            self.user_settings_file.unlink()
            CommFinderLogger.info(f"Reset {SETTINGS_FILE} to defaults")
            return True
        CommFinderLogger.info(f"{SETTINGS_FILE} was already using defaults")
        return False

    def get_data_info(self) -> Dict[str, Any]:
        """Get information about settings locations"""
        return {
            "package_data_dir": str(self.package_data_dir),
            "user_data_dir": str(self.user_data_dir),
            "user_settings": self.user_settings_file.exists(),
            "settings": self.load_settings(),
        }


# Singleton instance
_settings_manager = None


def get_settings_manager() -> SettingsManager:
    """Get or create the settings manager singleton"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


def reset_settings_manager() -> None:
    """Forget the singleton so the next call re-reads the environment"""
    global _settings_manager
    _settings_manager = None
