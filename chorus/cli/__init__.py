"""
chorus - Command Line Interface

Developer tooling for exercising a skill locally. Built with Typer for the
command line and Rich for output.

Usage:
    $ chorus --help
    $ chorus invoke my_skill.app:sb requests/hello.json
    $ chorus inspect my_skill.app:skill

A SKILL argument is a ``module:attribute`` path to either a built Skill or a
SkillBuilder (which is built on load).
"""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.panel import Panel

from chorus import __version__
from chorus.cli.output import (
    console,
    print_error,
    print_json,
    print_key_value,
    print_table,
)
from chorus.config.settings import settings
from chorus.dispatch.mapper import RequestMapper
from chorus.exceptions import ChorusError
from chorus.model.request import RequestEnvelope
from chorus.skill.builder import SkillBuilder
from chorus.skill.skill import Skill

app = typer.Typer(
    name="chorus",
    help="chorus - voice skill request dispatch toolkit",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"chorus version {__version__}")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    """Set verbose mode."""
    level = logging.DEBUG if value else getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(level=level)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        callback=verbose_callback,
        help="Enable debug logging.",
    ),
) -> None:
    """
    chorus - voice skill request dispatch toolkit

    Invoke a skill with a request file or inspect how it is wired.
    """
    pass


def load_skill(path: str) -> Skill:
    """Import ``module:attribute`` and return it as a Skill.

    Raises:
        typer.BadParameter: If the path is malformed, cannot be imported,
            or does not name a Skill or SkillBuilder
    """
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise typer.BadParameter(f"Expected 'module:attribute', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import {module_name!r}: {e}") from e

    target = getattr(module, attribute, None)
    if isinstance(target, SkillBuilder):
        return target.build()
    if isinstance(target, Skill):
        return target
    raise typer.BadParameter(f"{path!r} is not a Skill or SkillBuilder")


@app.command()
def invoke(
    skill_path: str = typer.Argument(..., metavar="SKILL", help="module:attribute of the skill."),
    request_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON request envelope.",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        "-r",
        help="Print plain JSON without highlighting.",
    ),
) -> None:
    """
    Dispatch one request envelope to a skill and print the response.
    """
    skill = load_skill(skill_path)

    try:
        request_envelope = RequestEnvelope.model_validate(json.loads(request_file.read_text()))
    except (json.JSONDecodeError, ValidationError) as e:
        print_error(f"Invalid request envelope in {request_file}", details=str(e))
        raise typer.Exit(2)

    try:
        response_envelope = skill.invoke(request_envelope)
    except ChorusError as e:
        cause = getattr(e, "cause", None)
        print_error(
            str(e),
            details=repr(cause) if cause is not None else None,
            hint="Register an exception handler to recover from this failure.",
        )
        raise typer.Exit(1)
    except Exception as e:
        print_error(
            f"Skill raised {type(e).__name__}: {e}",
            hint="An exception handler failed while recovering; its error is not recovered again.",
        )
        raise typer.Exit(1)

    print_json(response_envelope.to_wire(), raw=raw)


@app.command()
def inspect(
    skill_path: str = typer.Argument(..., metavar="SKILL", help="module:attribute of the skill."),
) -> None:
    """
    Show how a skill is wired: mappers, handlers, interceptors and adapters.
    """
    skill = load_skill(skill_path)
    configuration = skill.configuration

    rows: list[list[str]] = []
    for index, mapper in enumerate(configuration.request_mappers):
        if isinstance(mapper, RequestMapper):
            for priority, chain in enumerate(mapper.request_handler_chains):
                rows.append([
                    str(index),
                    str(priority),
                    type(chain.request_handler).__name__,
                    str(len(chain.request_interceptors)),
                    str(len(chain.response_interceptors)),
                ])
        else:
            rows.append([str(index), "-", type(mapper).__name__, "-", "-"])

    console.print(Panel.fit(f"[bold]Skill[/bold] {skill.skill_id or '(no skill id)'}"))
    print_table(
        "Request handlers",
        ["Mapper", "Priority", "Handler", "Req. interceptors", "Resp. interceptors"],
        rows,
        styles=["dim", "dim", "cyan", None, None],
    )

    exception_handlers = getattr(configuration.exception_mapper, "exception_handlers", ())
    print_key_value(
        [
            ("Handler adapters", _names(configuration.handler_adapters)),
            ("Exception handlers", _names(exception_handlers)),
            ("Request interceptors", _names(configuration.request_interceptors)),
            ("Response interceptors", _names(configuration.response_interceptors)),
            ("Persistence adapter", _name_or_none(configuration.persistence_adapter)),
            ("API client", _name_or_none(configuration.api_client)),
        ],
        title="Configuration",
    )


def _names(items: tuple) -> str:
    return ", ".join(type(item).__name__ for item in items) or "none"


def _name_or_none(item: object) -> str:
    return type(item).__name__ if item is not None else "none"


__all__ = ["app", "load_skill"]
