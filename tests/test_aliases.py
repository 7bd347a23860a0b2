"""
Unit tests for the alias dictionary.
"""
import json

from complens.vocabulary.aliases import AliasDictionary, AliasEntry, load_entries


class TestLoad:
    def test_load_keeps_file_key_order_and_lowercases(self, tmp_path):
        path = tmp_path / "keywords.json"
        path.write_text(json.dumps({"zeta": ["Z-Thing"], "alpha": ["A", "a", "Alpha Box"]}), encoding="utf-8")
        entries = load_entries(path)
        assert [e.name for e in entries] == ["zeta", "alpha"]
        assert entries[0].aliases == ("z-thing",)
        # duplicate after lowercasing collapses
        assert entries[1].aliases == ("a", "alpha box")

    def test_utf8_bom_is_accepted(self, tmp_path):
        path = tmp_path / "keywords.json"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"tooltip": ["ipucu"]}).encode("utf-8"))
        entries = load_entries(path)
        assert [(e.name, e.aliases) for e in entries] == [("tooltip", ("ipucu",))]

    def test_missing_file_yields_empty(self, tmp_path, caplog):
        caplog.set_level("WARNING", logger="complens.vocabulary")
        assert load_entries(tmp_path / "nope.json") == []
        assert "Failed to load component keywords" in caplog.text

    def test_malformed_file_yields_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_entries(path) == []
        path.write_text(json.dumps(["a", "b"]), encoding="utf-8")
        assert load_entries(path) == []
        path.write_text(json.dumps({"a": "not-a-list"}), encoding="utf-8")
        assert load_entries(path) == []

    def test_dictionary_load_is_soft(self, tmp_path):
        d = AliasDictionary.load(tmp_path / "missing.json")
        assert len(d) == 0
        assert d.all_names() == ()

    def test_bundled_keywords_file_loads(self):
        d = AliasDictionary.load()
        assert len(d) > 0
        assert d.canonical_name_of("tool tip") == "tooltip"


class TestLookup:
    def test_canonical_name_of_resolves_alias_case_insensitive(self, dictionary):
        assert dictionary.canonical_name_of("IPUCU") == "tooltip"
        assert dictionary.canonical_name_of("Data Table") == "datatable"
        assert dictionary.canonical_name_of("Modal") == "modal"

    def test_canonical_name_of_unknown_is_lowercased(self, dictionary):
        assert dictionary.canonical_name_of("FancyWidget") == "fancywidget"

    def test_all_names_canonical_then_aliases(self, dictionary):
        names = dictionary.all_names()
        assert names[:4] == ("datatable", "datatable", "data table", "tablo")
        assert "sepet" in names

    def test_by_longest_alias_is_stable(self):
        d = AliasDictionary([
            AliasEntry("a", ("xx",)),
            AliasEntry("b", ("yyyy",)),
            AliasEntry("c", ("zz",)),
            AliasEntry("d", ()),
        ])
        assert [e.name for e in d.by_longest_alias()] == ["b", "a", "c", "d"]

    def test_duplicate_canonical_names_keep_first(self):
        d = AliasDictionary([AliasEntry("a", ("one",)), AliasEntry("a", ("two",))])
        assert len(d) == 1
        assert d.entries[0].aliases == ("one",)
