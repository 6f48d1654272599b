from typing import Any, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True

class LayoutSettings(BaseModel):
    """Node box metrics shared by drawing and hit testing."""
    node_width: float = 192.0
    header_height: float = 32.0
    content_offset_y: float = 100.0  # header + padding + content box
    pin_height: float = 24.0
    pin_gap: float = 16.0
    body_padding: float = 16.0  # below the last pin row

class InteractionSettings(BaseModel):
    pin_hit_radius: float = 10.0
    start_task: int = 0

class LoggingSettings(BaseModel):
    log_dir: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "1 week"

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    interaction: InteractionSettings = Field(default_factory=InteractionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    tasks_file: Optional[str] = None

# --- Manager ---
class ConfigManager:
    """
    Manages engine configuration with optional persistence and reactivity.

    Without a filepath the configuration lives in memory only.
    """
    def __init__(self, filepath: Optional[str] = None):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        if self.filepath:
            self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if not isinstance(section_obj, BaseModel) or key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # Validate the whole section so a bad value never lands in the live config
        candidate = section_obj.model_copy(update={key: value})
        validated = type(section_obj).model_validate(candidate.model_dump())
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
                logger.debug(f"Loaded config from {self.filepath}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if not self.filepath or self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
