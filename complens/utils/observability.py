"""Logging for attribution decisions, model fallback outcomes and batch runs."""
from __future__ import annotations

import logging
from typing import List, Optional

logger = logging.getLogger("complens.observability")


def log_attribution(strategy: str, names: List[str], title: Optional[str] = None) -> None:
    logger.debug("attribution strategy=%s names=%s title=%r", strategy, names, (title or "")[:80])


def log_model_fallback(outcome: str, count: int = 0, title: Optional[str] = None) -> None:
    logger.info("model_fallback outcome=%s count=%s title=%r", outcome, count, (title or "")[:80])


def log_batch(total: int, analyzed: int, buckets: int, latency_ms: float) -> None:
    logger.info("batch total=%s analyzed=%s buckets=%s latency_ms=%.2f", total, analyzed, buckets, latency_ms)
