"""Task references, attribution results and per-component aggregation buckets."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from complens.utils.config import OLLAMA_BASE_URL, OLLAMA_MODEL

COMPLETED_STATUSES = ("done", "completed")


class AttributionStrategy(str, Enum):
    HINT = "hint"
    TITLE_PREFIX = "title_prefix"
    ALIAS = "alias"
    IDENTIFIER = "identifier"
    DESCRIPTION_PHRASE = "description_phrase"
    DESCRIPTION_ALIAS = "description_alias"
    DESCRIPTION_IDENTIFIER = "description_identifier"
    MODEL = "model"
    NONE = "none"


class TaskRef(BaseModel):
    """Input for a single attribution. component_name_hint wins over any text signal."""

    component_name_hint: Optional[str] = None
    title: str = ""
    description: Optional[str] = None


class TaskRecord(TaskRef):
    """Task as handed to batch aggregation: attribution input plus status fields."""

    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    severity: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status in COMPLETED_STATUSES


class Attribution(BaseModel):
    """Which strategy produced the names. names is the plain caller-facing result."""

    strategy: AttributionStrategy = AttributionStrategy.NONE
    names: List[str] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.names)


class TaskSummary(BaseModel):
    id: Optional[Union[int, str]] = None
    title: str
    description: Optional[str] = None
    status: str = "unknown"
    severity: Optional[str] = None


class ComponentBucket(BaseModel):
    name: str
    count: int = 0
    active_count: int = 0
    completed_count: int = 0
    tasks: List[TaskSummary] = Field(default_factory=list)


class ComponentAnalysis(BaseModel):
    buckets: List[ComponentBucket] = Field(default_factory=list)
    total_tasks: int = 0
    analyzed_tasks: int = 0


class ModelConfig(BaseModel):
    """Partial config accepted; missing fields fall back to environment defaults."""

    base_url: Optional[str] = None
    model: Optional[str] = None

    def resolved(self) -> "ModelConfig":
        return ModelConfig(
            base_url=(self.base_url or OLLAMA_BASE_URL).rstrip("/"),
            model=self.model or OLLAMA_MODEL,
        )
