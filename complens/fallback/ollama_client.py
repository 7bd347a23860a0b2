"""Ollama client: availability probe and prompt-based component extraction."""
from __future__ import annotations

import json
import logging
import re
from typing import List, Optional

import httpx

from complens.extraction.schema import ModelConfig
from complens.fallback.prompts import EXTRACTION_TEMPLATE
from complens.utils.config import GENERATE_TIMEOUT, NUM_PREDICT, PROBE_TIMEOUT

_log = logging.getLogger("complens.fallback")


def parse_json_array(text: str) -> list:
    """Extract a JSON array from model output (may be wrapped in markdown)."""
    text = (text or "").strip()
    # Remove markdown code block if present
    m = re.search(r"```(?:json)?\s*([\s\S]*?)```", text)
    if m:
        text = m.group(1).strip()
    start = text.find("[")
    if start == -1:
        return []
    depth = 0
    end = -1
    in_string = False
    escaped = False
    for i, c in enumerate(text[start:], start=start):
        if in_string:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
            continue
        if c == '"':
            in_string = True
        elif c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth == 0:
                end = i
                break
    if end == -1:
        return []
    try:
        parsed = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return []
    return parsed if isinstance(parsed, list) else []


class OllamaClient:
    """
    Thin client for a local Ollama server (GET /api/tags, POST /api/generate).
    transport is for tests (httpx.MockTransport).
    """

    def __init__(
        self,
        probe_timeout: float = PROBE_TIMEOUT,
        generate_timeout: float = GENERATE_TIMEOUT,
        num_predict: int = NUM_PREDICT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.probe_timeout = probe_timeout
        self.generate_timeout = generate_timeout
        self.num_predict = min(num_predict, 100)
        self._transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self._transport)

    def is_available(self, config: Optional[ModelConfig] = None) -> bool:
        """True only on HTTP 200 from /api/tags; never raises."""
        cfg = (config or ModelConfig()).resolved()
        try:
            with self._client(self.probe_timeout) as client:
                r = client.get(f"{cfg.base_url}/api/tags")
                return r.status_code == 200
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            _log.debug("Ollama probe failed at %s: %s", cfg.base_url, e)
            return False

    def generate(self, prompt: str, config: Optional[ModelConfig] = None) -> str:
        """Raw completion text. Raises httpx.HTTPError on transport/status errors, ValueError on bad body."""
        cfg = (config or ModelConfig()).resolved()
        payload = {
            "model": cfg.model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": 0, "num_predict": self.num_predict},
        }
        with self._client(self.generate_timeout) as client:
            r = client.post(f"{cfg.base_url}/api/generate", json=payload)
            r.raise_for_status()
            data = r.json()
        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise ValueError("no response field in Ollama output")
        return data["response"]

    def extract_components(self, text: str, config: Optional[ModelConfig] = None) -> List[str]:
        """
        Component names the model finds in text, lowercased and trimmed.
        Timeouts, transport errors and malformed output all yield [].
        """
        if not text or not text.strip():
            return []
        prompt = EXTRACTION_TEMPLATE.format(text=text)
        try:
            response = self.generate(prompt, config)
        except httpx.TimeoutException:
            _log.warning("LLM request timed out")
            return []
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            _log.warning("LLM request failed: %s", e)
            return []
        items = parse_json_array(response)
        if not items:
            _log.debug("No JSON array in LLM response: %r", response[:200])
        out = []
        for item in items:
            if isinstance(item, str) and item.strip():
                out.append(item.strip().lower())
        return out
