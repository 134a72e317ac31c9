from __future__ import annotations

import logging
from typing import Any

import httpx

from app.ats.outcome import Outcome
from app.ats.random_source import RandomSource, default_random_source
from app.core.config import settings
from app.core.config.scoring import get_scoring_value
from app.schemas.ats import ExternalExample

logger = logging.getLogger(__name__)

SOURCE = "corpus"
MAX_BATCH = 100
_GATED_MARKERS = ("authentication", "gated", "private")


def _payload_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _is_gated(error: str) -> bool:
    lower = error.lower()
    return any(marker in lower for marker in _GATED_MARKERS)


def _parse_rows(rows: list[Any], min_score: float) -> list[ExternalExample]:
    examples: list[ExternalExample] = []
    for item in rows:
        row = item.get("row") if isinstance(item, dict) else None
        if not isinstance(row, dict):
            continue
        text = row.get("text")
        score = row.get("ats_score")
        if not isinstance(text, str) or not text:
            continue
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            continue
        if score > min_score:
            examples.append(ExternalExample(text=text, ats_score=float(score)))
    return examples


class CorpusClient:
    """Best-effort reader for a remote corpus of ATS-scored resumes."""

    def __init__(
        self,
        *,
        url: str | None = None,
        dataset: str | None = None,
        config: str | None = None,
        split: str | None = None,
        max_offset: int | None = None,
        timeout_s: float | None = None,
        min_score: float | None = None,
        enabled: bool | None = None,
        rng: RandomSource | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url or settings.corpus_url
        self._dataset = dataset or settings.corpus_dataset
        self._config = config or settings.corpus_config
        self._split = split or settings.corpus_split
        self._max_offset = max_offset or settings.corpus_max_offset
        self._timeout_s = timeout_s or settings.corpus_timeout_s
        self._min_score = (
            min_score if min_score is not None else float(get_scoring_value("corpus.min_ats_score", 70))
        )
        self._enabled = settings.corpus_enabled if enabled is None else enabled
        self._rng = rng or default_random_source()
        self._transport = transport

    @property
    def timeout_s(self) -> float:
        return self._timeout_s

    async def fetch_high_scoring_examples(self, limit: int = MAX_BATCH) -> Outcome[list[ExternalExample]]:
        if not self._enabled:
            return Outcome.unavailable(SOURCE, "disabled")

        # Random offset so repeated calls sample different rows.
        offset = self._rng.randrange(self._max_offset)
        params = {
            "dataset": self._dataset,
            "config": self._config,
            "split": self._split,
            "offset": offset,
            "length": min(max(limit, 1), MAX_BATCH),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_s,
                transport=self._transport,
                headers={"Accept": "*/*"},
            ) as client:
                response = await client.get(self._url, params=params)
        except httpx.HTTPError as exc:
            logger.info("ats_corpus_transport_failed offset=%s: %s", offset, exc)
            return Outcome.unavailable(SOURCE, "transport_error")

        payload = _payload_or_empty(response)
        error = payload.get("error") if isinstance(payload, dict) else None

        if not response.is_success:
            if isinstance(error, str) and "authentication" in error.lower():
                logger.info("ats_corpus_gated status=%s", response.status_code)
                return Outcome.unavailable(SOURCE, "gated")
            logger.info("ats_corpus_http_error status=%s", response.status_code)
            return Outcome.unavailable(SOURCE, f"http_{response.status_code}")

        if not isinstance(payload, dict):
            logger.info("ats_corpus_invalid_payload type=%s", type(payload).__name__)
            return Outcome.unavailable(SOURCE, "invalid_payload")

        if error:
            if isinstance(error, str) and _is_gated(error):
                logger.info("ats_corpus_gated error=%s", error)
                return Outcome.unavailable(SOURCE, "gated")
            logger.info("ats_corpus_payload_error error=%s", error)
            return Outcome.unavailable(SOURCE, "payload_error")

        rows = payload.get("rows")
        if not isinstance(rows, list):
            return Outcome.unavailable(SOURCE, "no_rows")

        examples = _parse_rows(rows, self._min_score)
        if not examples:
            return Outcome.unavailable(SOURCE, "no_high_scoring_rows")

        self._rng.shuffle(examples)
        examples = examples[: min(limit, len(examples))]
        examples.sort(key=lambda example: example.ats_score, reverse=True)

        logger.info("ats_corpus_sampled count=%s offset=%s", len(examples), offset)
        return Outcome.ok(SOURCE, examples)
