"""Shared fixtures: a synthetic alias dictionary and a stub model client."""
from typing import List, Optional

import pytest

from complens.vocabulary.aliases import AliasDictionary

KEYWORDS = {
    "datatable": ["datatable", "data table", "tablo"],
    "tooltip": ["tooltip", "ipucu"],
    "bottom sheet": ["bottom sheet", "bottomsheet"],
    "cart": ["cart", "sepet"],
    "modal": ["modal", "dialog", "popup"],
}


class StubModelClient:
    """Records calls; returns fixed names or raises."""

    def __init__(self, names: Optional[List[str]] = None, available: bool = True, error: Optional[Exception] = None):
        self.names = names or []
        self.available = available
        self.error = error
        self.probe_calls = 0
        self.extract_calls = 0
        self.texts: List[str] = []

    def is_available(self, config=None) -> bool:
        self.probe_calls += 1
        return self.available

    def extract_components(self, text, config=None):
        self.extract_calls += 1
        self.texts.append(text)
        if self.error is not None:
            raise self.error
        return list(self.names)


@pytest.fixture
def dictionary() -> AliasDictionary:
    return AliasDictionary.from_mapping(KEYWORDS)


@pytest.fixture
def stub_model():
    return StubModelClient(names=["tooltip"])
