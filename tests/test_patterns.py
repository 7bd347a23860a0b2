"""
Unit tests for the stateless extractors.
"""
from complens.extraction.patterns import (
    extract_description_phrase,
    extract_identifier_components,
    extract_kebab_components,
    extract_title_prefix,
    looks_like_component_name,
    match_keywords,
)


class TestLooksLikeComponentName:
    def test_requires_ui_vocabulary(self):
        assert looks_like_component_name("SubmitButton")
        assert looks_like_component_name("data-grid")
        assert not looks_like_component_name("UserService")

    def test_rejects_short_and_digit_leading(self):
        assert not looks_like_component_name("ta")
        assert not looks_like_component_name("3d-table")


class TestTitlePrefix:
    def test_name_followed_by_component_word(self, dictionary):
        assert extract_title_prefix("Datatable component hatası", dictionary.all_names()) == "datatable"
        assert extract_title_prefix("Tooltip componenti içinde kayma", dictionary.all_names()) == "tooltip"

    def test_multi_word_alias(self, dictionary):
        assert extract_title_prefix("Bottom sheet componenta bakılmalı", dictionary.all_names()) == "bottom sheet"

    def test_first_word_exact(self, dictionary):
        assert extract_title_prefix("Tooltip header hatası", dictionary.all_names()) == "tooltip"
        assert extract_title_prefix("  sepet boş görünüyor", dictionary.all_names()) == "sepet"

    def test_no_match_when_not_at_start(self, dictionary):
        assert extract_title_prefix("Header tooltip hatası", dictionary.all_names()) is None
        assert extract_title_prefix("", dictionary.all_names()) is None
        assert extract_title_prefix("   ", dictionary.all_names()) is None


class TestMatchKeywords:
    def test_returns_canonical_name(self, dictionary):
        assert match_keywords("Ürün ipucu yanlış", dictionary) == "tooltip"
        assert match_keywords("the Popup closes", dictionary) == "modal"

    def test_longest_alias_component_first(self, dictionary):
        # "bottom sheet" (12) outranks "modal"/"dialog" even though both appear
        assert match_keywords("dialog inside bottom sheet", dictionary) == "bottom sheet"

    def test_substring_fallback(self, dictionary):
        assert match_keywords("sepette ürün yok", dictionary) == "cart"

    def test_none_when_absent(self, dictionary):
        assert match_keywords("xyz", dictionary) is None
        assert match_keywords(None, dictionary) is None


class TestIdentifierComponents:
    def test_reserved_pascal_and_kebab(self):
        found = extract_identifier_components("CfaMyComponent breaks next to cfa-list-section")
        assert found == ["CfaMyComponent", "cfa-list-section"]

    def test_namespace_import_captures_name_segment(self):
        # the reserved-kebab pass also picks up the namespace token itself
        found = extract_identifier_components("import x from '@cfa-web-components/page-header'")
        assert found == ["cfa-web-components", "page-header"]
        found = extract_identifier_components("@cfa-web-components/cfa-page-header")
        assert found == ["cfa-web-components", "cfa-page-header"]

    def test_generic_pascal_filtered(self):
        found = extract_identifier_components("InputField crashes with AbortController in UserService")
        assert found == ["InputField"]

    def test_deduplicated(self):
        assert extract_identifier_components("CfaButton and CfaButton") == ["CfaButton"]

    def test_custom_prefix(self):
        found = extract_identifier_components("AcmeCard / acme-card", prefix="acme", namespace="acme-ui")
        assert found == ["AcmeCard", "acme-card"]

    def test_empty(self):
        assert extract_identifier_components("") == []
        assert extract_identifier_components("plain words only") == []


class TestKebabComponents:
    def test_filters_non_component_tokens(self):
        assert extract_kebab_components("the data-table and well-known user-profile-card") == [
            "data-table",
            "user-profile-card",
        ]


class TestDescriptionPhrase:
    def test_extracts_bare_noun(self):
        assert extract_description_phrase("Sayfadaki datatable componentinin filtresi çalışmıyor") == "datatable"
        assert extract_description_phrase("Ana topnavbar componentu kayıyor") == "topnavbar"

    def test_requires_inflected_component(self):
        assert extract_description_phrase("datatable component is broken") is None
        assert extract_description_phrase(None) is None
