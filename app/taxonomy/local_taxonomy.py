from __future__ import annotations

import json
from pathlib import Path

from .provider import KeywordTaxonomy


class LocalKeywordTaxonomy(KeywordTaxonomy):
    def __init__(self, keywords_path: str | Path | None = None) -> None:
        path = Path(keywords_path) if keywords_path else Path(__file__).with_name("keywords.json")
        raw = self._load_keywords(path)
        self._technical = tuple(raw.get("technical", []))
        self._soft = tuple(raw.get("soft", []))
        self._action_verbs = tuple(raw.get("action_verbs", []))

    @staticmethod
    def _load_keywords(path: Path) -> dict[str, list[str]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {str(key): [str(item) for item in values] for key, values in raw.items()}

    def technical_keywords(self) -> tuple[str, ...]:
        return self._technical

    def soft_keywords(self) -> tuple[str, ...]:
        return self._soft

    def action_verbs(self) -> tuple[str, ...]:
        return self._action_verbs

    def has_action_verb(self, text: str) -> bool:
        lower = (text or "").lower()
        return any(verb.lower() in lower for verb in self._action_verbs)

    def matching_technical(self, text: str) -> set[str]:
        lower = (text or "").lower()
        return {keyword for keyword in self._technical if keyword.lower() in lower}
