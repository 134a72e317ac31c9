from __future__ import annotations

from typing import Protocol


class KeywordTaxonomy(Protocol):
    def technical_keywords(self) -> tuple[str, ...]:
        """Canonical technical keywords, in display order."""

    def soft_keywords(self) -> tuple[str, ...]:
        """Canonical soft-skill keywords."""

    def action_verbs(self) -> tuple[str, ...]:
        """Canonical action verbs used to open achievement bullets."""

    def has_action_verb(self, text: str) -> bool:
        """Return True when any action verb occurs in text (case-insensitive)."""

    def matching_technical(self, text: str) -> set[str]:
        """Return the technical keywords occurring in text (case-insensitive)."""
