# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
BICS Agent CLI Commands.

Lists, describes and invokes resource operations. Discovery commands read
the static resource tables and need no configuration; ``call`` loads the
layered configuration and builds the full registry.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bics_agent.errors import AdapterConfigurationError, RegistryError
from bics_agent.resources import ALL_RESOURCES
from bics_agent.runtime.bootstrap import build_registry, build_transport, configure_logging
from bics_agent.runtime.config import load_api_settings
from bics_agent.runtime.models import ModelApiSettings

console = Console()

EXIT_DIAGNOSIS: int = 1
EXIT_CONFIGURATION: int = 2


def _parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values:
        name, sep, rest = value.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got '{value}'", param_hint=option)
        pairs[name.strip()] = rest
    return pairs


@click.group()
def cli() -> None:
    """BICS API agent: capability adapters for the BICS REST APIs."""
    configure_logging()


@cli.command("operations")
@click.option("--resource", default=None, help="Only list operations of this resource")
def operations_cmd(resource: str | None) -> None:
    """List every registered operation."""
    resources = [r for r in ALL_RESOURCES if resource is None or r.name == resource]
    if not resources:
        console.print(f"[bold red]Unknown resource: {escape(resource or '')}[/bold red]")
        raise SystemExit(EXIT_CONFIGURATION)

    table = Table(title="Operations")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Operation", style="bold", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")

    for definition in resources:
        for descriptor in definition.descriptors:
            parameters = ", ".join(
                p.name if p.required else f"[{p.name}]" for p in descriptor.parameters
            )
            table.add_row(
                definition.name,
                descriptor.name,
                escape(parameters),
                escape(descriptor.description),
            )

    console.print(table)
    total = sum(len(definition.operations) for definition in resources)
    console.print(f"\n[bold]{total} operations in {len(resources)} resources[/bold]")


@cli.command("describe")
@click.argument("resource")
@click.argument("operation")
def describe_cmd(resource: str, operation: str) -> None:
    """Print the descriptor of one operation as JSON."""
    for definition in ALL_RESOURCES:
        if definition.name != resource:
            continue
        binding = definition.get_binding(operation)
        if binding is not None:
            click.echo(json.dumps(binding.descriptor.model_dump(mode="json"), indent=2))
            return
    console.print(
        f"[bold red]No operation registered for {escape(resource)}.{escape(operation)}[/bold red]"
    )
    raise SystemExit(EXIT_CONFIGURATION)


async def _invoke(
    settings: ModelApiSettings,
    resource: str,
    operation: str,
    args: tuple[str, ...],
    kwargs: dict[str, str],
) -> str:
    async with build_transport(settings) as transport:
        registry = build_registry(settings, transport)
        return await registry.invoke(resource, operation, *args, **kwargs)


@cli.command("call")
@click.argument("resource")
@click.argument("operation")
@click.argument("values", nargs=-1)
@click.option("--arg", "arg_pairs", multiple=True, help="Keyword argument as NAME=VALUE")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file (default: $BICS_AGENT_CONFIG)",
)
@click.option(
    "--base-url",
    "base_urls",
    multiple=True,
    help="Base URL override as SETTINGS_KEY=URL (e.g. connect_api=https://...)",
)
def call_cmd(
    resource: str,
    operation: str,
    values: tuple[str, ...],
    arg_pairs: tuple[str, ...],
    config_path: Path | None,
    base_urls: tuple[str, ...],
) -> None:
    """Invoke one operation and print its result.

    Positional VALUES bind to the operation's parameters in order.
    """
    kwargs = _parse_pairs(arg_pairs, "--arg")
    overrides = _parse_pairs(base_urls, "--base-url")

    try:
        settings = load_api_settings(config_path=config_path, overrides=overrides)
        result = asyncio.run(_invoke(settings, resource, operation, values, kwargs))
    except AdapterConfigurationError as e:
        console.print(f"[bold red]Configuration error: {escape(e.message)}[/bold red]")
        raise SystemExit(EXIT_CONFIGURATION) from e
    except RegistryError as e:
        console.print(f"[bold red]{escape(e.message)}[/bold red]")
        raise SystemExit(EXIT_CONFIGURATION) from e

    click.echo(result)
    if result.startswith("Error:"):
        raise SystemExit(EXIT_DIAGNOSIS)


__all__: list[str] = ["cli"]
