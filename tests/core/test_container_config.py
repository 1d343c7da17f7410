from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from interviewscore.adapters import InMemoryStore, JsonFileStore
from interviewscore.container import create_container
from interviewscore.schemas.config import AppConfig, load_config


def test_create_container_defaults():
    container = create_container()

    assert isinstance(container.key_value_store(), InMemoryStore)
    assert container.notifier().dismiss_after_ms == 3500
    workflow = container.workflow()
    assert workflow.current_screen == "candidate"
    assert workflow.session.weights.model_dump() == {"psychometric": 20, "technical": 40, "final": 40}


def test_create_container_with_overrides(tmp_path: Path):
    store_path = tmp_path / "weights.json"
    container = create_container(
        settings={
            "storage": {"path": store_path},
            "notifications": {"dismiss_after_ms": 1200},
        }
    )

    store = container.key_value_store()
    notifier = container.notifier()

    assert isinstance(store, JsonFileStore)
    assert store.path == store_path
    assert notifier.dismiss_after_ms == 1200
    assert container.weight_store()._persistence is store


def test_workflows_share_the_weight_store(tmp_path: Path):
    container = create_container(settings={"storage": {"path": tmp_path / "w.json"}})

    first = container.workflow()
    first.submit_weights({"psychometric": 60, "technical": 20, "final": 20})
    second = container.workflow()

    assert second.session.weights.psychometric == 60


def test_load_config_validation(tmp_path: Path):
    data = {
        "storage": {"path": str(tmp_path / "store.json")},
        "notifications": {"dismiss_after_ms": 2000},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["storage"]["path"] == tmp_path / "store.json"
    assert settings["notifications"]["dismiss_after_ms"] == 2000


def test_load_config_empty_document_uses_defaults():
    app_config = load_config(None)

    assert app_config.notifications.dismiss_after_ms == 3500
    assert app_config.to_settings() == {}


@pytest.mark.parametrize(
    "raw",
    [["not", "a", "mapping"], {"notifications": {"dismiss_after_ms": 0}}, {"unknown": {}}],
)
def test_load_config_rejects_invalid(raw):
    with pytest.raises(ValidationError):
        load_config(raw)
