"""Unit tests for preference persistence."""

import json
from unittest.mock import Mock

from hacker_stories.services.preferences import InMemoryStore, JsonFileStore, SemiPersistentValue


class TestJsonFileStore:
    """Test cases for JsonFileStore."""

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileStore(str(tmp_path / "prefs.json"))

        assert store.get("search") is None

    def test_set_persists_across_instances(self, tmp_path):
        path = str(tmp_path / "nested" / "prefs.json")

        JsonFileStore(path).set("search", "Redux")

        assert JsonFileStore(path).get("search") == "Redux"
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"search": "Redux"}

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        store = JsonFileStore(str(path))
        store.set("search", "Vue")

        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", "search": "Vue"}

    def test_corrupt_file_is_treated_as_empty(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")

        store = JsonFileStore(str(path))

        assert store.get("search") is None

    def test_non_object_file_is_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps(["React"]), encoding="utf-8")

        assert JsonFileStore(str(path)).get("search") is None


class TestSemiPersistentValue:
    """Test cases for SemiPersistentValue."""

    def test_default_when_absent(self):
        value = SemiPersistentValue(InMemoryStore(), "search", "React")

        assert value.value == "React"

    def test_default_when_stored_value_is_empty(self):
        value = SemiPersistentValue(InMemoryStore({"search": ""}), "search", "React")

        assert value.value == "React"

    def test_stored_value_wins(self):
        value = SemiPersistentValue(InMemoryStore({"search": "Redux"}), "search", "React")

        assert value.value == "Redux"

    def test_set_writes_through(self):
        store = InMemoryStore()
        value = SemiPersistentValue(store, "search", "React")

        value.set("Svelte")

        assert value.value == "Svelte"
        assert store.get("search") == "Svelte"

    def test_write_failure_is_swallowed(self):
        store = Mock()
        store.get.return_value = None
        store.set.side_effect = OSError("disk full")
        value = SemiPersistentValue(store, "search", "React")

        value.set("Svelte")

        assert value.value == "Svelte"
        store.set.assert_called_once_with("search", "Svelte")

    def test_read_failure_falls_back_to_default(self):
        store = Mock()
        store.get.side_effect = OSError("permission denied")

        value = SemiPersistentValue(store, "search", "React")

        assert value.value == "React"
