from typing import Any
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import ObserverEvent


# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    log_dir: str = "logs"
    theme: str = "Fusion"


class FeedSettings(BaseModel):
    base_url: str = "http://api.flickr.com"
    path: str = "/services/feeds/photos_public.gne"
    format: str = "rss_200"
    timeout_seconds: float = Field(default=15.0, gt=0)
    user_agent: str = "photofeed/0.1"


class SearchSettings(BaseModel):
    debounce_ms: int = Field(default=800, ge=0)
    cancel_superseded: bool = True


class WindowSettings(BaseModel):
    title: str = "Photo Feed Browser"
    width: int = 640
    height: int = 720
    thumbnail_size: int = 100


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)


# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = ObserverEvent("ConfigChanged")
        self._persist = not filepath.endswith(".toml")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # Re-validate the whole section so field constraints apply
        validated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, validated)
        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                # Keep the broken file for the user to fix; run on defaults
                logger.error(f"Failed to load config from {self.filepath}, using defaults: {e}")
                self._persist = False
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if not self._persist:
            # TOML files and files that failed to load are read-only input
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
