from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Tagged result of one strategy: either a value or the reason it is unavailable."""

    source: str
    value: T | None = None
    reason: str | None = None

    @property
    def available(self) -> bool:
        return self.reason is None

    @classmethod
    def ok(cls, source: str, value: T) -> "Outcome[T]":
        return cls(source=source, value=value)

    @classmethod
    def unavailable(cls, source: str, reason: str) -> "Outcome[T]":
        return cls(source=source, reason=reason)

    def unwrap(self) -> T:
        if not self.available:
            raise LookupError(f"{self.source} unavailable: {self.reason}")
        return self.value  # type: ignore[return-value]


Strategy = Callable[[], Awaitable[Outcome[T]]]


async def first_available(strategies: Sequence[Strategy[T]]) -> Outcome[T]:
    """Run strategies in order and return the first available outcome."""
    if not strategies:
        raise ValueError("at least one strategy is required")

    *earlier, last = strategies
    for strategy in earlier:
        outcome = await strategy()
        if outcome.available:
            return outcome
        logger.info("ats_strategy_unavailable source=%s reason=%s", outcome.source, outcome.reason)

    outcome = await last()
    if not outcome.available:
        logger.info("ats_strategy_unavailable source=%s reason=%s", outcome.source, outcome.reason)
    return outcome


async def guarded(source: str, call: Awaitable[Outcome[T]], timeout_s: float) -> Outcome[T]:
    """Bound an external call by a timeout; failures become unavailable outcomes."""
    try:
        return await asyncio.wait_for(call, timeout=timeout_s)
    except asyncio.TimeoutError:
        logger.warning("ats_external_timeout source=%s timeout_s=%s", source, timeout_s)
        return Outcome.unavailable(source, "timeout")
    except Exception as exc:  # noqa: BLE001
        logger.warning("ats_external_failed source=%s: %s", source, exc)
        return Outcome.unavailable(source, f"error: {exc.__class__.__name__}")
