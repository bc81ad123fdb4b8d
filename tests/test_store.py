"""Tests for the JSON string-table store."""

import json

import pytest

from locale_translator.store import JsonStringTableStore


@pytest.fixture
def tables_file(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text(
        json.dumps(
            {
                "UI": {"zh-Hans": {"ok": "确定", "cancel": "取消"}, "en": {"ok": "OK"}},
                "Dialogue": {"zh-Hans": {"hi": "你好"}, "ja": {}},
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


class TestJsonStringTableStore:
    """Test loading, lookup and saving."""

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonStringTableStore(tmp_path / "absent.json")
        assert store.tables() == []
        assert store.locales() == []

    def test_tables_and_locales(self, tables_file):
        store = JsonStringTableStore(tables_file)
        assert store.tables() == ["UI", "Dialogue"]
        assert store.locales() == ["en", "ja", "zh-Hans"]

    def test_get_table(self, tables_file):
        store = JsonStringTableStore(tables_file)
        assert store.get_table("UI", "en") == {"ok": "OK"}
        assert store.get_table("Dialogue", "ja") == {}
        assert store.get_table("Dialogue", "en") is None
        assert store.get_table("Missing", "en") is None

    def test_get_table_returns_copy(self, tables_file):
        store = JsonStringTableStore(tables_file)
        store.get_table("UI", "en")["ok"] = "changed"
        assert store.get_table("UI", "en") == {"ok": "OK"}

    def test_set_entry_and_save(self, tables_file):
        store = JsonStringTableStore(tables_file)
        store.set_entry("Dialogue", "ja", "hi", "こんにちは")
        store.save()

        text = tables_file.read_text(encoding="utf-8")
        assert "こんにちは" in text  # non-ASCII kept as-is
        assert JsonStringTableStore(tables_file).get_table("Dialogue", "ja") == {"hi": "こんにちは"}

    def test_add_locale(self, tables_file):
        store = JsonStringTableStore(tables_file)
        store.add_locale("UI", "ko")
        assert store.get_table("UI", "ko") == {}
        assert "ko" in store.locales()

    def test_invalid_document(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError):
            JsonStringTableStore(path)
