from __future__ import annotations

"""Configuration utilities for swaragraph.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the ingest, window, tonic, axis, card
and visualisation sections.  Instances can be populated from environment
variables (``SWARAGRAPH_AXIS__PIXEL_HEIGHT=400``) or from YAML/JSON files with
matching nested keys.
"""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import EnvSettingsSource

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_strings(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class IngestSettings(SectionModel):
    """Options controlling pitch file ingestion."""

    extensions: list[str] = Field(default_factory=lambda: [".txt", ".csv"])
    encoding: str = "utf8"

    @field_validator("extensions", mode="before")
    @classmethod
    def _coerce_extensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = _split_strings(value)
        if isinstance(value, (list, tuple)):
            out = []
            for item in value:
                ext = str(item).strip().lower()
                out.append(ext if ext.startswith(".") else f".{ext}")
            return out
        return value


class WindowSettings(SectionModel):
    """Default visible time range and the empty-window policy."""

    start: float | None = None
    end: float | None = None
    snap_to_nearest: bool = True


class TonicSettings(SectionModel):
    """Reference pitch for cents conversion; ``None`` keeps values in Hz."""

    hz: float | None = None


class AxisSettings(SectionModel):
    """Value and time axis tick generation."""

    y_axis: Literal["numeric", "swaras"] = "numeric"
    numeric_tick_count: int = Field(default=5, ge=1)
    time_tick_count: int = Field(default=6, ge=1)
    value_precision: int = Field(default=1, ge=0)
    time_precision: int = Field(default=2, ge=0)
    epsilon: float = Field(default=1.0, gt=0)
    min_pixel_spacing: float = Field(default=40.0, ge=0)
    pixel_height: float = Field(default=280.0, gt=0)


class CardSettings(SectionModel):
    """Limits for the multi-card board."""

    max_cards: int = Field(default=20, ge=1)


class VizSettings(SectionModel):
    """Configuration for chart adapters."""

    adapter: str = "matplotlib"
    title: str = "Pitch Graph"
    time_label: str = "Time (s)"
    save: str | None = None
    show: bool = False


class LoggingSettings(SectionModel):
    """Log level for the ``swaragraph`` logger."""

    level: str = "warning"


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    ingest: IngestSettings = Field(default_factory=IngestSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)
    tonic: TonicSettings = Field(default_factory=TonicSettings)
    axis: AxisSettings = Field(default_factory=AxisSettings)
    cards: CardSettings = Field(default_factory=CardSettings)
    viz: VizSettings = Field(default_factory=VizSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="SWARAGRAPH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        class LenientEnvSettingsSource(EnvSettingsSource):
            def decode_complex_value(self, field_name, target_field, value):  # type: ignore[override]
                try:
                    return super().decode_complex_value(field_name, target_field, value)
                except json.JSONDecodeError:
                    return value

        env_settings.__class__ = LenientEnvSettingsSource
        return init_settings, env_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``SWARAGRAPH_*`` environment variables only."""

        return cls()


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
