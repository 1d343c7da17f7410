"""Typer CLI entrypoint for the evaluation workflow."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .adapters import TransientNotifier
from .container import EvaluationContainer, create_container
from .core import EvaluationWorkflow
from .logging import configure_logging
from .schemas import STAGE_KEYS
from .schemas.config import load_config
from .views import confidence_report

app = typer.Typer(help="Candidate interview evaluation CLI.")
weights_app = typer.Typer(help="Inspect or change the stage weights.")
app.add_typer(weights_app, name="weights")

_SEVERITY_COLORS = {
    "info": typer.colors.BLUE,
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "danger": typer.colors.RED,
}


def _read_yaml(path: Path, param_name: str) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("File must contain a YAML or JSON object", param_name=param_name)
    return loaded


def _build_container(config: Optional[Path], store: Optional[Path]) -> EvaluationContainer:
    raw = _read_yaml(config, "config") if config else None
    try:
        app_config = load_config(raw)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc
    settings = app_config.to_settings()
    if store is not None:
        settings["storage"] = {"path": store}
    return create_container(settings=settings)


def _echo_notifications(notifier: TransientNotifier) -> None:
    for notification in notifier.history:
        typer.secho(
            f"[{notification.severity}] {notification.message}",
            fg=_SEVERITY_COLORS.get(notification.severity),
            err=True,
        )


def replay(workflow: EvaluationWorkflow, document: dict[str, Any]) -> None:
    """Feed an evaluation document through the workflow in screen order."""
    if document.get("weights") is not None:
        workflow.navigate_to("weights")
        workflow.submit_weights(document["weights"])

    workflow.submit_candidate(document.get("candidate") or {})

    stages = document.get("stages") or {}
    for stage in STAGE_KEYS:
        payload = stages.get(stage)
        if payload is None:
            continue
        if workflow.navigate_to(stage).accepted:
            workflow.submit_stage(stage, payload)

    workflow.navigate_to("confidence")


@app.command()
def evaluate(
    evaluation: Path = typer.Option(
        ...,
        "--input",
        exists=True,
        readable=True,
        dir_okay=False,
        help="Evaluation document (YAML or JSON).",
    ),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path for the confidence report.",
    ),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="JSON file persisting the weights."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score a candidate from an evaluation document and write the report."""
    document = _read_yaml(evaluation, "input")

    configure_logging(log_level)

    container = _build_container(config, store)
    workflow = container.workflow()
    replay(workflow, document)
    _echo_notifications(container.notifier())

    report = confidence_report(workflow.session)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")

    score = report["confidence_score"]
    if score is None:
        typer.echo(f"Evaluation incomplete. Partial report saved to {output}.")
        raise typer.Exit(code=1)
    typer.echo(f"Confidence score {score}% ({report['recommendation']}). Report saved to {output}.")


@weights_app.command("show")
def show_weights(
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="JSON file persisting the weights."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """Print the weights a new session would start with."""
    container = _build_container(config, store)
    weights = container.weight_store().load()
    for stage, weight in weights.model_dump().items():
        typer.echo(f"{stage}: {weight}%")


@weights_app.command("set")
def set_weights(
    psychometric: int = typer.Argument(..., help="Psychometric stage weight (%)."),
    technical: int = typer.Argument(..., help="Technical stage weight (%)."),
    final: int = typer.Argument(..., help="Final interview weight (%)."),
    store: Optional[Path] = typer.Option(None, dir_okay=False, help="JSON file persisting the weights."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """Validate and persist new stage weights."""
    container = _build_container(config, store)
    workflow = container.workflow()
    workflow.navigate_to("weights")
    result = workflow.submit_weights(
        {"psychometric": psychometric, "technical": technical, "final": final}
    )
    if not result.accepted:
        typer.secho(result.message or "Weights rejected", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Weights saved: {psychometric}/{technical}/{final}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
