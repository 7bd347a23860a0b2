"""Component API: attribute one task, analyze a batch, model status, vocabulary."""
from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from complens.attribution.service import AttributionService
from complens.extraction.schema import ComponentAnalysis, ModelConfig, TaskRecord, TaskRef


def get_service(request: Request) -> AttributionService:
    return request.app.state.attribution_service

router = APIRouter(prefix="/components", tags=["components"])


class AttributeBody(BaseModel):
    task: TaskRef
    use_model: bool = True
    llm: Optional[ModelConfig] = Field(None, description="Ollama base_url/model overrides")


class AnalyzeBody(BaseModel):
    tasks: List[TaskRecord] = Field(default_factory=list)
    use_model: bool = True
    llm: Optional[ModelConfig] = None


class AttributeResponse(BaseModel):
    names: List[str]
    strategy: str


@router.post("/attribute", response_model=AttributeResponse)
def attribute(body: AttributeBody, service: AttributionService = Depends(get_service)):
    """Components for one task; model fallback only when no pattern matched."""
    result = service.attribute_detailed(body.task, use_model=body.use_model, config=body.llm)
    return AttributeResponse(names=result.names, strategy=result.strategy.value)


@router.post("/analyze", response_model=ComponentAnalysis)
def analyze(body: AnalyzeBody, service: AttributionService = Depends(get_service)):
    return service.analyze_tasks(body.tasks, use_model=body.use_model, config=body.llm)


@router.get("/model-status")
def model_status(
    base_url: Optional[str] = Query(None),
    model: Optional[str] = Query(None),
    service: AttributionService = Depends(get_service),
) -> Dict[str, bool]:
    return {"available": service.is_model_available(ModelConfig(base_url=base_url, model=model))}


@router.get("/vocabulary")
def vocabulary(service: AttributionService = Depends(get_service)) -> Dict[str, List[str]]:
    """Canonical component name -> aliases, in dictionary order."""
    return service.dictionary.to_mapping()
