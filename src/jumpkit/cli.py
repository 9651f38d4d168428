"""CLI for JumpKit."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from jumpkit.config import JumpkitConfig, load_config
from jumpkit.domain.models import JumpFormInputs
from jumpkit.safe_json import safe_parse_json
from jumpkit.server.wire import ServiceBundle, build_services

app = typer.Typer(help="JumpKit CLI")

logger = logging.getLogger(__name__)


@app.command("format")
def format_command(
    path: Optional[Path] = typer.Argument(None, help="Text file to format (stdin when omitted)"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
) -> None:
    """Rewrite raw AI text as Markdown."""
    services = _services(config, log_level)
    raw = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    typer.echo(services.format_document(raw))


@app.command("name")
def name_command(
    goals: str = typer.Option("", "--goals"),
    challenges: str = typer.Option("", "--challenges"),
    industry: str = typer.Option("", "--industry"),
    experience_level: str = typer.Option("", "--experience-level"),
    inputs_path: Optional[Path] = typer.Option(
        None, "--inputs", help="JSON file with the form inputs (overrides the field options)"
    ),
    user_id: Optional[str] = typer.Option(None, "--user-id", help="Owner used to number the Jump"),
    save: bool = typer.Option(False, "--save", help="Record the named Jump in the configured store"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to config YAML"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
) -> None:
    """Name a Jump from its form inputs."""
    services = _services(config, log_level)
    if inputs_path:
        inputs = _load_inputs(inputs_path)
    else:
        inputs = JumpFormInputs(
            goals=goals,
            challenges=challenges,
            industry=industry,
            experience_level=experience_level,
        )
    if save and not user_id:
        raise typer.BadParameter("--save requires --user-id", param_hint="--save")

    result = services.name_jump(inputs, user_id=user_id)
    if save:
        try:
            record = services.record_jump(user_id, result)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--save") from exc
        logger.info("Recorded jump %s for user %s", record.id, user_id)

    if as_json:
        typer.echo(json.dumps(result.model_dump(by_alias=True), ensure_ascii=False))
    else:
        typer.echo(result.full_title)


def _services(config_path: Optional[str], log_level: Optional[str]) -> ServiceBundle:
    cfg = load_config(config_path) if config_path else JumpkitConfig()
    _configure_logging(log_level or cfg.logging.level)
    return build_services(cfg, Path(config_path) if config_path else None)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_inputs(path: Path) -> JumpFormInputs:
    if not path.exists():
        raise typer.BadParameter(f"Inputs file not found: {path}", param_hint="--inputs")
    payload = safe_parse_json(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"No JSON object found in {path}", param_hint="--inputs")
    return JumpFormInputs.model_validate(payload)
