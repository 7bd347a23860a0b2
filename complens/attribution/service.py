"""Attribution service: pattern detection first, model fallback on empty, batch aggregation into buckets."""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from complens.extraction.detector import ComponentDetector
from complens.extraction.schema import (
    Attribution,
    AttributionStrategy,
    ComponentAnalysis,
    ComponentBucket,
    ModelConfig,
    TaskRecord,
    TaskRef,
    TaskSummary,
)
from complens.extraction.specificity import resolve_specificity
from complens.fallback.ollama_client import OllamaClient
from complens.utils.config import BATCH_WORKERS
from complens.utils.observability import log_attribution, log_batch, log_model_fallback
from complens.vocabulary.aliases import AliasDictionary

_log = logging.getLogger("complens.attribution")

_TaskKey = Tuple[str, str, str]


def _as_task(task: Union[TaskRef, dict, None], model=TaskRef) -> TaskRef:
    if task is None:
        raise TypeError("task is required")
    if isinstance(task, dict):
        return model.model_validate(task)
    if not isinstance(task, model):
        return model.model_validate(task.model_dump())
    return task


class AttributionService:
    """
    Entry points: attribute(), analyze_tasks(), is_model_available().
    Model failures never propagate; they attribute to [].
    """

    def __init__(
        self,
        dictionary: Optional[AliasDictionary] = None,
        detector: Optional[ComponentDetector] = None,
        model_client: Optional[Any] = None,
        max_workers: int = BATCH_WORKERS,
    ):
        if detector is None:
            detector = ComponentDetector(dictionary if dictionary is not None else AliasDictionary.load())
        self.detector = detector
        self.dictionary = detector.dictionary
        self.model_client = model_client if model_client is not None else OllamaClient()
        self.max_workers = max(1, max_workers)

    def is_model_available(self, config: Optional[ModelConfig] = None) -> bool:
        try:
            return bool(self.model_client.is_available(config))
        except Exception as e:
            _log.warning("Model availability probe raised: %s", e)
            return False

    def attribute_detailed(
        self,
        task: Union[TaskRef, dict],
        use_model: bool = True,
        config: Optional[ModelConfig] = None,
    ) -> Attribution:
        task = _as_task(task)
        result = self.detector.detect(task)
        if result.names:
            log_attribution(result.strategy.value, result.names, task.title)
            return result
        if not use_model:
            return Attribution()
        if not self.is_model_available(config):
            log_model_fallback("unavailable", title=task.title)
            return Attribution()
        text = f"{task.title or ''} {task.description or ''}".strip()
        if not text:
            return Attribution()
        try:
            raw = self.model_client.extract_components(text, config)
        except Exception as e:
            _log.warning("LLM extraction failed for task %r: %s", task.title, e)
            return Attribution()
        names = resolve_specificity(raw or [], prefix=self.detector.prefix)
        log_model_fallback("hit" if names else "empty", count=len(names), title=task.title)
        if not names:
            return Attribution()
        return Attribution(strategy=AttributionStrategy.MODEL, names=names)

    def attribute(
        self,
        task: Union[TaskRef, dict],
        use_model: bool = True,
        config: Optional[ModelConfig] = None,
    ) -> List[str]:
        return self.attribute_detailed(task, use_model, config).names

    def analyze_tasks(
        self,
        tasks: Iterable[Union[TaskRecord, dict]],
        use_model: bool = True,
        config: Optional[ModelConfig] = None,
        max_workers: Optional[int] = None,
    ) -> ComponentAnalysis:
        """
        Attribute every task and fold the names into buckets keyed by lowercased name.
        Identical (hint, title, description) inputs are attributed once per call.
        Buckets: most active first, then most tasks; ties keep discovery order.
        """
        t0 = time.perf_counter()
        records = [_as_task(t, TaskRecord) for t in tasks]
        keys = [_task_key(r) for r in records]
        unique: Dict[_TaskKey, TaskRecord] = {}
        for key, record in zip(keys, records):
            unique.setdefault(key, record)

        workers = max(1, max_workers or self.max_workers)
        pending = list(unique.items())
        if workers > 1 and len(pending) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                names = list(pool.map(lambda kv: self.attribute(kv[1], use_model, config), pending))
        else:
            names = [self.attribute(record, use_model, config) for _, record in pending]
        by_key = {key: n for (key, _), n in zip(pending, names)}

        buckets: Dict[str, ComponentBucket] = {}
        for key, record in zip(keys, records):
            for component in by_key[key]:
                normalized = component.lower().strip()
                if not normalized:
                    continue
                bucket = buckets.get(normalized)
                if bucket is None:
                    bucket = buckets[normalized] = ComponentBucket(name=normalized)
                bucket.count += 1
                if record.is_completed:
                    bucket.completed_count += 1
                else:
                    bucket.active_count += 1
                bucket.tasks.append(_summary(record))

        ordered = sorted(buckets.values(), key=lambda b: (-b.active_count, -b.count))
        log_batch(len(records), len(records), len(ordered), (time.perf_counter() - t0) * 1000)
        return ComponentAnalysis(buckets=ordered, total_tasks=len(records), analyzed_tasks=len(records))


def _task_key(task: TaskRef) -> _TaskKey:
    return (task.component_name_hint or "", task.title or "", task.description or "")


def _summary(record: TaskRecord) -> TaskSummary:
    return TaskSummary(
        id=record.id,
        title=record.title,
        description=record.description or None,
        status=record.status or "unknown",
        severity=record.severity or None,
    )
