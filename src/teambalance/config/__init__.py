"""Configuration helpers for weight presets and engine limits."""

from .settings import EngineSettings, load_settings
from .weights import WeightPreset, apply_overrides, get_preset, iter_presets

__all__ = [
    "EngineSettings",
    "WeightPreset",
    "apply_overrides",
    "get_preset",
    "iter_presets",
    "load_settings",
]
