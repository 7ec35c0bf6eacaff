# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CLI entry point: Click-based commands over the synchronous client."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import click

from .config import ClientConfig
from .errors import TwistError


@contextmanager
def _client(ctx: click.Context) -> Iterator[Any]:
    from .client import TwistClient

    config = ctx.obj["config"]
    if not config.token:
        click.echo("ERROR: no API token; pass --token or set TWIST_API_TOKEN.", err=True)
        sys.exit(1)
    with TwistClient(config=config) as client:
        try:
            yield client
        except TwistError as e:
            click.echo(f"ERROR: {e.message}", err=True)
            sys.exit(1)


@click.group()
@click.option("--token", envvar="TWIST_API_TOKEN", default=None, help="API token (env: TWIST_API_TOKEN)")
@click.option("--base-url", default=None, help="API host, e.g. https://api.twist.com")
@click.option("--verbose", "-v", is_flag=True, help="Log every HTTP request")
@click.pass_context
def cli(ctx: click.Context, token: str | None, base_url: str | None, verbose: bool) -> None:
    """Twist Python SDK: command-line access to the Twist API."""
    ctx.ensure_object(dict)
    config = ClientConfig.from_env()
    if token:
        config = dataclasses.replace(config, token=token)
    if base_url:
        config = dataclasses.replace(config, base_url=base_url)
    ctx.obj["config"] = config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.pass_context
def me(ctx: click.Context) -> None:
    """Show the authenticated user."""
    with _client(ctx) as client:
        user = client.users.get_session_user()
        click.echo(f"{user.name} <{user.email}> (id {user.id})")


@cli.command()
@click.pass_context
def workspaces(ctx: click.Context) -> None:
    """List workspaces the user belongs to."""
    with _client(ctx) as client:
        items = client.workspaces.get_workspaces()
        if not items:
            click.echo("No workspaces.")
            return
        for w in items:
            click.echo(f"  {w.id:>10}  {w.name}")


@cli.command()
@click.argument("workspace_id", type=int)
@click.option("--archived", is_flag=True, help="List archived channels instead")
@click.pass_context
def channels(ctx: click.Context, workspace_id: int, archived: bool) -> None:
    """List channels in a workspace."""
    with _client(ctx) as client:
        items = client.channels.get_channels(workspace_id, archived=archived or None)
        if not items:
            click.echo("No channels.")
            return
        for ch in items:
            flag = " (archived)" if ch.archived else ""
            click.echo(f"  {ch.id:>10}  {ch.name}{flag}")


@cli.command()
@click.argument("workspace_id", type=int)
@click.argument("query")
@click.option("--limit", "-n", default=None, type=int, help="Max results")
@click.pass_context
def search(ctx: click.Context, workspace_id: int, query: str, limit: int | None) -> None:
    """Full-text search across a workspace."""
    with _client(ctx) as client:
        result = client.search.search(workspace_id, query, limit=limit)
        if not result.items:
            click.echo("No results.")
            return
        for item in result.items:
            click.echo(f"  [{item.type}] {item.title or ''} {item.snippet[:80]}")
        if result.has_more:
            click.echo("  ...")


@cli.command()
@click.argument("method", type=click.Choice(["GET", "POST"], case_sensitive=False))
@click.argument("path")
@click.argument("params", required=False, default=None)
@click.option("--api-version", default=None, help="API version, e.g. v4")
@click.pass_context
def call(ctx: click.Context, method: str, path: str, params: str | None, api_version: str | None) -> None:
    """Call any endpoint by path, with JSON params."""
    parsed: dict[str, Any] | None = None
    if params:
        try:
            parsed = json.loads(params)
        except json.JSONDecodeError:
            click.echo(f"ERROR: Invalid JSON params: {params}", err=True)
            sys.exit(1)

    with _client(ctx) as client:
        result = client.call(method, path, parsed, api_version)
        click.echo(json.dumps(result, indent=2, default=str))


def main() -> None:
    """Entry point for the ``twist`` console script."""
    cli(standalone_mode=True)
