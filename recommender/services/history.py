"""
Recommendation history — which device names were already shown for each
preference key during this session. In-memory only; grows, never shrinks.
"""

from typing import Dict, FrozenSet, Set

from ..models.preferences import PreferenceKey


class RecommendationHistory:
    """Per-key record of shown device names."""

    def __init__(self):
        self._shown: Dict[PreferenceKey, Set[str]] = {}

    def has_shown(self, key: PreferenceKey, device_name: str) -> bool:
        """True if device_name was previously recorded under key."""
        return device_name in self._shown.get(key, ())

    def record(self, key: PreferenceKey, device_name: str) -> None:
        """Add device_name under key. Recording the same pair twice is a no-op."""
        self._shown.setdefault(key, set()).add(device_name)

    def shown_for(self, key: PreferenceKey) -> FrozenSet[str]:
        return frozenset(self._shown.get(key, ()))

    def __len__(self) -> int:
        return sum(len(names) for names in self._shown.values())
