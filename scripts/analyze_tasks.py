#!/usr/bin/env python3
"""
Component analysis over a task export: which UI components the tasks mention.
Usage:
  python scripts/analyze_tasks.py tasks.json [--no-model] [--workers 4] [--top 20] [--json]
  tasks.json: [ {"id", "title", "description", "status", "severity", "component_name_hint"} ]
              or { "tasks": [ ... ] }
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from complens.attribution.service import AttributionService
from complens.extraction.schema import ModelConfig
from complens.utils.config import KEYWORDS_PATH
from complens.vocabulary.aliases import AliasDictionary


def main() -> int:
    parser = argparse.ArgumentParser(description="Attribute tasks to UI components and print per-component counts.")
    parser.add_argument("tasks_file", type=Path)
    parser.add_argument("--keywords", type=Path, default=KEYWORDS_PATH, help="Alias JSON (canonical -> aliases)")
    parser.add_argument("--no-model", action="store_true", help="Pattern strategies only; never call Ollama")
    parser.add_argument("--base-url", default=None, help="Ollama base URL")
    parser.add_argument("--model", default=None, help="Ollama model name")
    parser.add_argument("--workers", type=int, default=1, help="Parallel attributions (1 = sequential)")
    parser.add_argument("--top", type=int, default=20)
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    data = json.loads(args.tasks_file.read_text(encoding="utf-8"))
    tasks = data.get("tasks", []) if isinstance(data, dict) else data
    if not tasks:
        print("No tasks in file.")
        return 0

    service = AttributionService(dictionary=AliasDictionary.load(args.keywords), max_workers=args.workers)
    config = ModelConfig(base_url=args.base_url, model=args.model)
    use_model = not args.no_model
    if use_model and not service.is_model_available(config):
        print("Ollama not reachable; model fallback will return nothing.", file=sys.stderr)

    analysis = service.analyze_tasks(tasks, use_model=use_model, config=config)
    if args.json:
        print(analysis.model_dump_json(indent=2))
        return 0

    print(f"Tasks:     {analysis.total_tasks}")
    print(f"Analyzed:  {analysis.analyzed_tasks}")
    print(f"Components: {len(analysis.buckets)}")
    for bucket in analysis.buckets[: args.top]:
        print(f"  {bucket.name:<30} total={bucket.count:<4} active={bucket.active_count:<4} done={bucket.completed_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
