from __future__ import annotations

import json
from pathlib import Path

from interviewscore.adapters import InMemoryStore, JsonFileStore, KeyValueStore


def test_in_memory_store_get_and_set():
    store = InMemoryStore()

    assert store.get("evaluatorWeights") is None
    store.set("evaluatorWeights", "{}")
    assert store.get("evaluatorWeights") == "{}"
    assert isinstance(store, KeyValueStore)


def test_json_file_store_persists_across_instances(tmp_path: Path):
    path = tmp_path / "nested" / "store.json"

    JsonFileStore(path).set("evaluatorWeights", '{"psychometric": 10}')
    JsonFileStore(path).set("other", "value")

    reopened = JsonFileStore(path)
    assert reopened.get("evaluatorWeights") == '{"psychometric": 10}'
    assert reopened.get("other") == "value"
    assert json.loads(path.read_text(encoding="utf-8"))["other"] == "value"


def test_json_file_store_missing_file_reads_empty(tmp_path: Path):
    store = JsonFileStore(tmp_path / "absent.json")

    assert store.get("evaluatorWeights") is None


def test_json_file_store_corrupt_file_reads_empty(tmp_path: Path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)

    assert store.get("evaluatorWeights") is None

    store.set("evaluatorWeights", "x")
    assert store.get("evaluatorWeights") == "x"


def test_json_file_store_ignores_non_string_values(tmp_path: Path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"evaluatorWeights": {"psychometric": 20}}), encoding="utf-8")

    assert JsonFileStore(path).get("evaluatorWeights") is None
