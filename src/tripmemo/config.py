# src/tripmemo/config.py
import json
import logging
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Configure logger
logger = logging.getLogger(__name__)

# Config paths
CONFIG_DIR = Path.home() / ".tripmemo"
CONFIG_FILE = CONFIG_DIR / "settings.json"
PROFILES_DIR = CONFIG_DIR / "profiles"

DEFAULT_CONFIG = {
    "timezone": "",
    "default_trip_name": "",
    "log_level": "INFO",
    "last_input": "",
}

SETTINGS_KEYS = ("timezone", "default_trip_name", "log_level")


class ConfigManager:
    @staticmethod
    def load_config() -> Dict[str, Any]:
        """Load settings from the JSON file, or the defaults when it is missing or broken."""
        if not CONFIG_FILE.exists():
            return DEFAULT_CONFIG.copy()

        try:
            with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
                # Merge with defaults to handle new keys
                config = DEFAULT_CONFIG.copy()
                config.update(data)
                return config
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load configuration: {e}")
            return DEFAULT_CONFIG.copy()

    @staticmethod
    def _write(path: Path, data: Dict[str, Any]) -> bool:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            return True
        except OSError as e:
            logger.warning(f"Error saving {path.name}: {e}")
            return False

    @staticmethod
    def save_config(last_input: str = "", **kwargs) -> None:
        """Save the full configuration, keeping values that are not passed."""
        current = ConfigManager.load_config()

        if last_input:
            current["last_input"] = str(last_input)

        current.update(kwargs)
        ConfigManager._write(CONFIG_FILE, current)

    @staticmethod
    def update_settings(settings: Dict[str, Any]) -> None:
        """Update only evaluation settings (not paths)."""
        current = ConfigManager.load_config()
        for key in SETTINGS_KEYS:
            if key in settings:
                current[key] = settings[key]
        ConfigManager._write(CONFIG_FILE, current)

    @staticmethod
    def get_timezone(config: Dict[str, Any]) -> Optional[tzinfo]:
        """Zone named by the ``timezone`` setting, or None when unset or unknown."""
        name = (config.get("timezone") or "").strip()
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone '{name}'. Using photo wall-clock time.")
            return None

    # --- Profile Management ---
    @staticmethod
    def list_profiles() -> List[str]:
        """List all saved profile names."""
        if not PROFILES_DIR.exists():
            return []
        return sorted(p.stem for p in PROFILES_DIR.glob("*.json"))

    @staticmethod
    def save_profile(name: str, config: Dict[str, Any]) -> None:
        """Save a config as a named profile."""
        if ConfigManager._write(PROFILES_DIR / f"{name}.json", config):
            logger.info(f"Profile saved: {name}")

    @staticmethod
    def load_profile(name: str) -> Dict[str, Any]:
        """Load a named profile."""
        profile_path = PROFILES_DIR / f"{name}.json"
        if not profile_path.exists():
            logger.warning(f"Profile not found: {name}")
            return DEFAULT_CONFIG.copy()

        try:
            with open(profile_path, "r", encoding="utf-8") as f:
                data = json.load(f)
                config = DEFAULT_CONFIG.copy()
                config.update(data)
                return config
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading profile: {e}")
            return DEFAULT_CONFIG.copy()

    @staticmethod
    def delete_profile(name: str) -> bool:
        """Delete a named profile."""
        profile_path = PROFILES_DIR / f"{name}.json"
        try:
            if profile_path.exists():
                profile_path.unlink()
                return True
        except OSError as e:
            logger.warning(f"Error deleting profile: {e}")
        return False
