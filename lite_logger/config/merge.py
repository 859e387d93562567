"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into base."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def lookup(overrides: Mapping[K, V], defaults: Mapping[K, V], key: K) -> V:
    """Return the override for ``key``, falling back to the default table."""
    if key in overrides:
        return overrides[key]
    return defaults[key]
