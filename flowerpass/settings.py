"""
Persistence of the popup settings.

LEGAL NOTICE:
The master password is only written here when the user ticks "Remember".
The file is restricted to its owner. Use only on devices you own or administer.
"""

import os
import json
import shutil
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .codec import EncodingMode
from .utils import set_owner_only_permissions
from . import config

logger = logging.getLogger(__name__)


@dataclass
class PopupSettings:
    """Values the popup restores on start."""
    remember: bool = False
    length: int = config.DEFAULT_LENGTH
    mode: EncodingMode = EncodingMode(config.DEFAULT_MODE)
    memory_password: str = field(default="", repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization, dropping the password unless remembered."""
        data = {
            'remember': self.remember,
            'length': self.length,
            'mode': self.mode.value,
        }
        if self.remember:
            data['memoryPassword'] = self.memory_password
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PopupSettings':
        """Create from dictionary, replacing unusable values with defaults."""
        settings = cls()
        settings.remember = bool(data.get('remember', False))

        try:
            length = int(data.get('length', config.DEFAULT_LENGTH))
        except (TypeError, ValueError):
            length = config.DEFAULT_LENGTH
        if length not in config.LENGTH_OPTIONS:
            logger.warning(f"Ignoring saved length {length}, using {config.DEFAULT_LENGTH}")
            length = config.DEFAULT_LENGTH
        settings.length = length

        try:
            settings.mode = EncodingMode.from_value(data.get('mode', config.DEFAULT_MODE))
        except ValueError as e:
            logger.warning(f"{e}, using {config.DEFAULT_MODE}")

        if settings.remember:
            settings.memory_password = str(data.get('memoryPassword') or "")
        return settings


def get_default_settings_path() -> str:
    """Get the default path of the settings file."""
    home = os.path.expanduser("~")
    return os.path.join(home, config.CONFIG_DIR_NAME, config.SETTINGS_FILE)


class SettingsStore:
    """Reads and writes PopupSettings as JSON."""

    def __init__(self, filepath: Optional[str] = None):
        """
        Initialize the settings store.
        Args:
            filepath: Path to the settings file, defaults to ~/.flowerpass/settings.json
        """
        self.filepath = filepath or get_default_settings_path()
        self._lock = threading.Lock()

    def load(self) -> PopupSettings:
        """Load settings, falling back to defaults if the file is missing or unreadable."""
        with self._lock:
            if not os.path.exists(self.filepath):
                return PopupSettings()
            try:
                with open(self.filepath, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                return PopupSettings.from_dict(data)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read settings from {self.filepath}: {e}. Using defaults.")
                return PopupSettings()

    def save(self, settings: PopupSettings) -> None:
        """Write settings atomically. The master password is removed unless remembered."""
        with self._lock:
            os.makedirs(os.path.dirname(os.path.abspath(self.filepath)), exist_ok=True)
            tmp_path = self.filepath + '.tmp'
            try:
                with open(tmp_path, 'w', encoding='utf-8') as f:
                    json.dump(settings.to_dict(), f, indent=2)
                set_owner_only_permissions(tmp_path)

                # Atomic replace using shutil.move
                shutil.move(tmp_path, self.filepath)

                if not set_owner_only_permissions(self.filepath):
                    logger.warning(f"Failed to set secure file permissions for settings: {self.filepath}.")
            except Exception as e:
                logger.error(f"Error saving settings file {self.filepath}: {e}", exc_info=True)
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
