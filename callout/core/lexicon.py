"""Exercise lexicon: known exercise names plus alias -> canonical mappings.

The lexicon is the only state that outlives a ``parse`` call. It is held
as an immutable ``LexiconSnapshot`` that writers replace wholesale, so a
parse reading one snapshot always sees a consistent view. Concurrent
writers must be serialized by the caller.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from callout.core.constants import DEFAULT_ALIASES, KNOWN_EXERCISES


def normalize_name(name: str) -> str:
    """Lowercase and collapse whitespace in an exercise phrase."""
    return " ".join(name.lower().split())


class LexiconSnapshot:
    """Read-only view of the lexicon at one point in time."""

    __slots__ = ("names", "aliases", "known")

    def __init__(self, names: Iterable[str], aliases: Mapping[str, str]) -> None:
        self.names: FrozenSet[str] = frozenset(
            normalize_name(name) for name in names if name.strip()
        )
        self.aliases: Mapping[str, str] = MappingProxyType(dict(aliases))
        self.known: FrozenSet[str] = self.names | frozenset(self.aliases)

    def is_known(self, name: str) -> bool:
        """Return True when ``name`` looks like a known exercise.

        Matches exact names, or either string containing the other. There
        is no minimum length, so very short names match generously.
        """
        candidate = normalize_name(name)
        if not candidate:
            return False
        if candidate in self.known:
            return True
        return any(candidate in entry or entry in candidate for entry in self.known)

    def canonical_name(self, phrase: str) -> Optional[str]:
        """Resolve a spoken phrase to a canonical exercise name via aliases.

        An exact alias wins; otherwise the longest alias appearing as whole
        words inside the phrase is used. Unlike ``is_known``, raw substrings
        do not count: "dead" resolves "dead lift" but not "deadbug".
        """
        candidate = normalize_name(phrase)
        if not candidate:
            return None
        if candidate in self.aliases:
            return self.aliases[candidate]

        padded = f" {candidate} "
        matches = [alias for alias in self.aliases if f" {alias} " in padded]
        if not matches:
            return None
        return self.aliases[max(matches, key=len)]


class ExerciseLexicon:
    """Known exercises and user-taught aliases."""

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        base_aliases = DEFAULT_ALIASES if aliases is None else aliases
        normalized = {normalize_name(alias): canonical for alias, canonical in base_aliases.items()}
        self._snapshot = LexiconSnapshot(KNOWN_EXERCISES if names is None else names, normalized)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ExerciseLexicon":
        """Build the default lexicon extended with configured names and aliases."""
        exercises_cfg = config.get("exercises", {}) or {}
        extra_names = [str(name) for name in exercises_cfg.get("known", []) or []]

        lexicon = cls(names=list(KNOWN_EXERCISES) + extra_names)
        for alias, canonical in (exercises_cfg.get("aliases", {}) or {}).items():
            lexicon.teach_alias(str(alias), str(canonical))
        return lexicon

    def snapshot(self) -> LexiconSnapshot:
        return self._snapshot

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._snapshot.aliases

    def is_known(self, name: str) -> bool:
        return self._snapshot.is_known(name)

    def canonical_name(self, phrase: str) -> Optional[str]:
        return self._snapshot.canonical_name(phrase)

    def teach_alias(self, alias: str, canonical: str) -> None:
        """Insert or overwrite ``alias -> canonical``."""
        key = normalize_name(alias)
        value = canonical.strip()
        if not key:
            raise ValueError("Alias must not be empty")
        if not value:
            raise ValueError("Canonical exercise name must not be empty")

        current = self._snapshot
        aliases = dict(current.aliases)
        aliases[key] = value
        self._snapshot = LexiconSnapshot(current.names, aliases)

    def forget_alias(self, alias: str) -> bool:
        """Remove an alias; return False when it was not present."""
        key = normalize_name(alias)
        current = self._snapshot
        if key not in current.aliases:
            return False

        aliases = dict(current.aliases)
        del aliases[key]
        self._snapshot = LexiconSnapshot(current.names, aliases)
        return True
