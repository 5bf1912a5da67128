"""Typer CLI for inspecting job content and generating hire pools."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import pendulum
import typer
from dependency_injector import providers
from pydantic import ValidationError

from . import __version__
from .campaign import CampaignWorld
from .config import load_yaml
from .container import create_container
from .core import ContentFormatError
from .logging import configure_logging
from .schemas.config import load_config
from .schemas.world import load_world

app = typer.Typer(help="Crew job definitions and hiring CLI.")


def _read_settings(config: Optional[Path]) -> dict[str, Any]:
    if config is None:
        return {}
    try:
        return load_yaml(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


@app.command()
def jobs(
    content: List[Path] = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job content file (XML or YAML)."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
) -> None:
    """List the jobs defined in the content files."""
    configure_logging(log_level)
    container = create_container()
    loader = container.content_loader()
    try:
        registry = loader.load_paths(list(content), container.job_registry())
    except ContentFormatError as exc:
        raise typer.BadParameter(str(exc), param_name="content") from exc

    for job in registry:
        skills = ",".join(skill.identifier for skill in job.skills) or "-"
        flags = " hidden" if job.hidden else ""
        typer.echo(f"{job.identifier}\tvariants={job.variants}\tskills={skills}{flags}")
    if len(loader.diagnostics):
        typer.echo(f"{len(loader.diagnostics)} content warning(s).", err=True)


@app.command()
def hire(
    content: List[Path] = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job content file (XML or YAML)."),
    world: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Campaign world YAML path."),
    location: str = typer.Option(..., help="Name of the location to hire at."),
    amount: Optional[int] = typer.Option(None, help="Number of candidates to generate before faction hireables."),
    seed: Optional[int] = typer.Option(None, help="Seed for the unsynced random source."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Output JSON path; prints to stdout when omitted."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Generate the hire pool at a location and price every candidate."""
    try:
        app_config = load_config(_read_settings(config))
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc
    if seed is not None:
        app_config.hiring.seed = seed

    configure_logging(log_level or app_config.logging.level, json_output=app_config.logging.json_output)

    container = create_container(settings=app_config.to_settings())
    loader = container.content_loader()
    try:
        registry = loader.load_paths(list(content), container.job_registry())
    except ContentFormatError as exc:
        raise typer.BadParameter(str(exc), param_name="content") from exc

    try:
        world_config = load_world(load_yaml(world))
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_name="world") from exc
    campaign = CampaignWorld.from_config(
        world_config,
        registry=registry,
        rng=container.unsynced_random(),
    )
    container.crew.override(providers.Object(campaign.crew))
    container.npc_templates.override(providers.Object(campaign.npc_sets))

    target = campaign.location(location)
    if target is None:
        raise typer.BadParameter(
            f"Unknown location {location!r}; known: {', '.join(campaign.location_names()) or '-'}",
            param_name="location",
        )

    pool = container.hire_pool()
    candidates = pool.generate_characters(target, amount)
    calculator = container.salary_calculator()
    records = [
        candidate.to_record(calculator.get_salary_for(candidate)).model_dump(mode="json")
        for candidate in candidates
    ]

    payload = {
        "metadata": {
            "location": target.name,
            "candidate_count": len(records),
            "total_salary": calculator.get_salary_for_all(candidates),
            "warnings": [
                {"kind": entry.kind, "event": entry.event, **entry.context}
                for entry in container.diagnostics()
            ],
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        },
        "candidates": records,
    }
    rendered = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(rendered)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    typer.echo(f"Generated {len(records)} candidates at {target.name}. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
