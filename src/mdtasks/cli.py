from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml

from .config import load_settings
from .errors import ParseError
from .logging import get_logger, set_level
from .models import Task, Tasks
from .parser import parse_file


app = typer.Typer(add_completion=False, help="Inspect tasks declared in a markdown document")
log = logging.getLogger("mdtasks.cli")

FileOpt = typer.Option(None, "--file", "-f", help="Markdown file holding the tasks")
HeadingOpt = typer.Option(None, "--heading", help="Heading of the tasks section")
ConfigOpt = typer.Option(None, "--config", help="Path to YAML config")
LogFileOpt = typer.Option(None, "--log-file", help="Also write logs to this file")


def load_tasks(
    file: Optional[str],
    heading: Optional[str],
    config: Optional[str],
    log_file: Optional[str] = None,
) -> Tasks:
    try:
        settings = load_settings(config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config: {e}", err=True)
        raise typer.Exit(code=1)
    set_level(settings.log_level)
    get_logger("mdtasks", Path(log_file) if log_file else None)
    path = file or settings.file
    section = heading or settings.heading
    log.info("Reading '%s' section from %s", section, path)
    try:
        return parse_file(path, section)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _summary(t: Task) -> str:
    if t.description:
        return f"{t.name} - {t.description[0]}"
    return t.name


@app.command("list")
def list_tasks(
    file: Optional[str] = FileOpt,
    heading: Optional[str] = HeadingOpt,
    config: Optional[str] = ConfigOpt,
    log_file: Optional[str] = LogFileOpt,
    as_json: bool = typer.Option(False, "--json", help="Print tasks as JSON"),
):
    """List tasks in document order."""
    tasks = load_tasks(file, heading, config, log_file)
    if as_json:
        typer.echo(json.dumps([t.to_dict() for t in tasks], indent=2))
        return
    if not tasks:
        typer.echo("No tasks found.")
        return
    for t in tasks:
        typer.echo(f"- {_summary(t)}")


@app.command()
def show(
    name: str = typer.Argument(..., help="Task name"),
    file: Optional[str] = FileOpt,
    heading: Optional[str] = HeadingOpt,
    config: Optional[str] = ConfigOpt,
    log_file: Optional[str] = LogFileOpt,
):
    """Show one task's attributes and script."""
    tasks = load_tasks(file, heading, config, log_file)
    t = tasks.find(name)
    if t is None:
        typer.echo(f"Task not found: {name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(t.name)
    for line in t.description:
        typer.echo(f"  {line}")
    if t.depends_on:
        typer.echo(f"Requires: {', '.join(t.depends_on)}")
    if t.env:
        typer.echo(f"Environment: {', '.join(t.env)}")
    if t.dir is not None:
        typer.echo(f"Directory: {t.dir}")
    if t.inputs:
        typer.echo(f"Inputs: {', '.join(t.inputs)}")
    if t.script:
        typer.echo("Script:")
        typer.echo(t.script, nl=False)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
