"""Dependency injection container for the evaluation workflow."""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import InMemoryStore, JsonFileStore, TransientNotifier
from .core import EvaluationWorkflow, WeightStore


class EvaluationContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    key_value_store = providers.Singleton(InMemoryStore)

    weight_store = providers.Singleton(
        WeightStore,
        persistence=key_value_store,
    )

    notifier = providers.Singleton(TransientNotifier)

    workflow = providers.Factory(
        EvaluationWorkflow,
        weight_store=weight_store,
        notifier=notifier,
    )


def create_container(*, settings: dict | None = None) -> EvaluationContainer:
    """Instantiate container with optional overrides."""

    container = EvaluationContainer()

    if not settings:
        return container

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    if storage_settings.get("path"):
        container.key_value_store.override(
            providers.Singleton(JsonFileStore, path=storage_settings["path"])
        )

    notification_settings = (
        settings.get("notifications", {}) if isinstance(settings, dict) else {}
    )
    if "dismiss_after_ms" in notification_settings:
        container.notifier.override(
            providers.Singleton(
                TransientNotifier,
                dismiss_after_ms=notification_settings["dismiss_after_ms"],
            )
        )

    return container
