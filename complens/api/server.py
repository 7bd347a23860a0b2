"""
ComponentLens FastAPI server: UI component attribution for bug/task records.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from complens.api.routes_components import router as components_router
from complens.attribution.service import AttributionService
from complens.fallback.ollama_client import OllamaClient
from complens.utils.config import BATCH_WORKERS, KEYWORDS_PATH
from complens.vocabulary.aliases import AliasDictionary

# Ensure attribution logs appear
_log = logging.getLogger("complens")
if not _log.handlers:
    _log.setLevel(logging.INFO)
    _log.addHandler(logging.StreamHandler())


app = FastAPI(
    title="ComponentLens",
    description="UI component attribution for bug and task records",
    version="0.1.0",
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    dictionary = AliasDictionary.load(KEYWORDS_PATH)
    if not len(dictionary):
        _log.warning("Alias dictionary is empty; keyword strategies will not match")
    else:
        _log.info("Loaded %d components from %s", len(dictionary), KEYWORDS_PATH)
    app.state.attribution_service = AttributionService(
        dictionary=dictionary,
        model_client=OllamaClient(),
        max_workers=BATCH_WORKERS,
    )


app.include_router(components_router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "complens"}
