"""Configuration management."""

import json
import logging
from pathlib import Path

from ..core.i18n import detect_language, normalize_language
from ..core.session import DEFAULT_GRACE_MS, DEFAULT_SETTLE_MS

logger = logging.getLogger(__name__)

APPEARANCE_MODES = ("Light", "Dark", "System")


class Config:
    """Manages application configuration."""

    def __init__(self, config_file: Path = None):
        if config_file is None:
            # Use user's home directory for config
            config_file = Path.home() / "thumbgrab_settings.json"
        self.file = Path(config_file)
        self.data = {
            "download_path": str(Path.home() / "Downloads" / "ThumbGrab"),
            "language": None,
            "appearance_mode": "System",
            "grace_delay_ms": DEFAULT_GRACE_MS,
            "settle_delay_ms": DEFAULT_SETTLE_MS,
            "probe_timeout": 10.0,
        }
        self.load()

    def load(self):
        """Load configuration from file."""
        if self.file.exists():
            try:
                with open(self.file, 'r', encoding='utf-8') as f:
                    self.data.update(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read settings from {self.file}, using defaults: {e}")

    def save(self):
        """Save configuration to file."""
        try:
            self.file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning(f"Could not save settings to {self.file}: {e}")

    @property
    def download_path(self) -> Path:
        """Get the download path."""
        value = self.data.get("download_path")
        if not value:
            return Path.home() / "Downloads" / "ThumbGrab"
        return Path(value)

    def set_download_path(self, path: str | Path):
        """Set the download path."""
        self.data["download_path"] = str(path)
        self.save()

    @property
    def language(self) -> str:
        """Saved UI language, else the OS language."""
        saved = self.data.get("language")
        if saved:
            return normalize_language(saved)
        return detect_language()

    def set_language(self, language: str):
        self.data["language"] = normalize_language(language)
        self.save()

    @property
    def appearance_mode(self) -> str:
        mode = self.data.get("appearance_mode")
        return mode if mode in APPEARANCE_MODES else "System"

    def set_appearance_mode(self, mode: str):
        if mode not in APPEARANCE_MODES:
            raise ValueError(f"Unknown appearance mode: {mode}")
        self.data["appearance_mode"] = mode
        self.save()

    @property
    def grace_delay_ms(self) -> int:
        return self._int("grace_delay_ms", DEFAULT_GRACE_MS)

    @property
    def settle_delay_ms(self) -> int:
        return self._int("settle_delay_ms", DEFAULT_SETTLE_MS)

    @property
    def probe_timeout(self) -> float:
        try:
            return float(self.data.get("probe_timeout"))
        except (TypeError, ValueError):
            return 10.0

    def _int(self, key: str, default: int) -> int:
        try:
            value = int(self.data.get(key))
        except (TypeError, ValueError):
            return default
        return value if value >= 0 else default
