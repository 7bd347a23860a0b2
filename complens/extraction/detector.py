"""Deterministic per-task component detection: strategies in strict priority order, no model calls."""
from __future__ import annotations

from typing import List, Optional

from complens.extraction.patterns import (
    extract_description_phrase,
    extract_identifier_components,
    extract_kebab_components,
    extract_title_prefix,
    match_keywords,
)
from complens.extraction.schema import Attribution, AttributionStrategy, TaskRef
from complens.extraction.specificity import resolve_specificity
from complens.utils.config import RESERVED_NAMESPACE, RESERVED_PREFIX
from complens.vocabulary.aliases import AliasDictionary


class ComponentDetector:
    """
    Priority order for one task; the first strategy with a result wins:
      1. component_name_hint
      2. title starts with a known name ("Datatable componenti ...")
      3. title alias/keyword match
      4. title identifiers (CfaButton, cfa-*, PascalCase) ranked by specificity
      5. description: "<noun> componenti" phrase, alias match, identifiers
    Nothing found -> Attribution(strategy=NONE, names=[]).
    """

    def __init__(
        self,
        dictionary: AliasDictionary,
        prefix: str = RESERVED_PREFIX,
        namespace: str = RESERVED_NAMESPACE,
    ):
        self.dictionary = dictionary
        self.prefix = prefix
        self.namespace = namespace

    def _identifiers(self, text: Optional[str]) -> List[str]:
        found = extract_identifier_components(text, prefix=self.prefix, namespace=self.namespace)
        return resolve_specificity(found, prefix=self.prefix)

    def detect(self, task: TaskRef) -> Attribution:
        if task is None:
            raise TypeError("task is required")
        hint = (task.component_name_hint or "").strip()
        if hint:
            return Attribution(strategy=AttributionStrategy.HINT, names=[hint])

        title = task.title or ""
        prefixed = extract_title_prefix(title, self.dictionary.all_names())
        if prefixed:
            return Attribution(strategy=AttributionStrategy.TITLE_PREFIX, names=[prefixed])

        keyword = match_keywords(title, self.dictionary)
        if keyword:
            return Attribution(strategy=AttributionStrategy.ALIAS, names=[keyword])

        identifiers = self._identifiers(title)
        if identifiers:
            return Attribution(strategy=AttributionStrategy.IDENTIFIER, names=identifiers)

        description = task.description
        if description:
            phrase = extract_description_phrase(description)
            if phrase:
                return Attribution(strategy=AttributionStrategy.DESCRIPTION_PHRASE, names=[phrase])
            keyword = match_keywords(description, self.dictionary)
            if keyword:
                return Attribution(strategy=AttributionStrategy.DESCRIPTION_ALIAS, names=[keyword])
            identifiers = self._identifiers(description)
            if identifiers:
                return Attribution(strategy=AttributionStrategy.DESCRIPTION_IDENTIFIER, names=identifiers)

        return Attribution()

    def extract(self, task: TaskRef) -> List[str]:
        return self.detect(task).names

    def detect_components(self, text: str, title: Optional[str] = None) -> List[str]:
        """
        Union of every strategy over free text, first-seen order, unranked.
        For exploratory queries; per-task attribution goes through detect().
        """
        found: List[str] = []
        if title:
            prefixed = extract_title_prefix(title, self.dictionary.all_names())
            if prefixed:
                found.append(prefixed)
        found.extend(extract_identifier_components(text, prefix=self.prefix, namespace=self.namespace))
        found.extend(extract_kebab_components(text))
        lower_text = (text or "").lower()
        for name in self.dictionary.all_names():
            if name and name.lower() in lower_text:
                found.append(name)
        return list(dict.fromkeys(found))
