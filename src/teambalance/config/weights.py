"""Named skill-weight presets for common match formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

from teambalance.models import SkillWeights


@dataclass(frozen=True)
class WeightPreset:
    key: str
    label: str
    weights: SkillWeights


_PRESETS: Dict[str, WeightPreset] = {
    "default": WeightPreset(
        key="default",
        label="Standard (attack emphasis)",
        weights=SkillWeights(),
    ),
    "uniform": WeightPreset(
        key="uniform",
        label="All skills equal",
        weights=SkillWeights(
            serve=1 / 6,
            set=1 / 6,
            block=1 / 6,
            receive=1 / 6,
            attack=1 / 6,
            defense=1 / 6,
        ),
    ),
    "offense": WeightPreset(
        key="offense",
        label="Offense first",
        weights=SkillWeights(
            serve=0.20,
            set=0.15,
            block=0.10,
            receive=0.10,
            attack=0.35,
            defense=0.10,
        ),
    ),
    "defense": WeightPreset(
        key="defense",
        label="Defense first",
        weights=SkillWeights(
            serve=0.10,
            set=0.15,
            block=0.20,
            receive=0.20,
            attack=0.10,
            defense=0.25,
        ),
    ),
}


def iter_presets() -> Iterable[WeightPreset]:
    """Return an iterator of all configured presets."""

    return _PRESETS.values()


def get_preset(key: str) -> WeightPreset:
    """Fetch a preset by key, raising KeyError if missing."""

    normalized = key.strip().lower()
    if normalized not in _PRESETS:
        raise KeyError(f"No weight preset configured for {key!r}")
    return _PRESETS[normalized]


def apply_overrides(weights: SkillWeights, overrides: Mapping[str, float]) -> SkillWeights:
    """Return ``weights`` with individual skills replaced."""

    unknown = set(overrides) - set(weights.as_dict())
    if unknown:
        raise KeyError(f"Unknown skill(s): {', '.join(sorted(unknown))}")
    return SkillWeights.model_validate({**weights.as_dict(), **overrides})
