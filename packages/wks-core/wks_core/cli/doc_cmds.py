"""
WKS Document CLI — inspect and rewrite workspace documents.

Commands:
    wks show <path>        — load a document and summarize or dump it
    wks save <path>        — load and re-save a document (splits inline collections)
    wks artifacts <path>   — list artifact directories and their file counts
"""
from __future__ import annotations

import json
import sys

import click

from ..artifacts.layout import artifacts_root, collection_directory
from ..models import Collection
from ..store import DocumentStore


def _get_store(ctx: click.Context) -> DocumentStore:
    store = ctx.obj.get("store") if ctx.obj else None
    if store is None:
        store = DocumentStore()
    return store


@click.command("show")
@click.argument("path")
@click.option("--json-out", "json_output", is_flag=True, help="Output the full document as JSON")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any artifacts failed to load")
@click.pass_context
def show(ctx: click.Context, path: str, json_output: bool, strict: bool):
    """Load a document and print it."""
    store = _get_store(ctx)
    result = store.load(path)

    for issue in result.issues:
        click.echo(f"Warning: {issue.message}", err=True)

    if result.document is None:
        click.echo(f"No document found at {path}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(result.document.to_dict(), indent=2, default=str))
    else:
        click.echo(f"Document: {path}")
        for collection in Collection:
            if result.document.has_collection(collection):
                entities = result.document.get_collection(collection) or []
                click.echo(f"  {collection.value}: {len(entities)}")
            else:
                click.echo(f"  {collection.value}: -")
        extra = sorted((result.document.model_extra or {}).keys())
        if extra:
            click.echo(f"  other keys: {', '.join(extra)}")

    if strict and not result.ok:
        sys.exit(1)


@click.command("save")
@click.argument("path")
@click.option("--pretty/--compact", default=None, help="Base document formatting (default: config)")
@click.pass_context
def save(ctx: click.Context, path: str, pretty: bool | None):
    """Load a document and write it back, splitting its collections."""
    store = _get_store(ctx)
    result = store.load(path)

    if result.document is None:
        click.echo(f"No document found at {path}", err=True)
        sys.exit(1)
    if not result.ok:
        for issue in result.issues:
            click.echo(f"Error: {issue.message}", err=True)
        click.echo("Refusing to save a partially loaded document.", err=True)
        sys.exit(1)

    counts = {c: len(result.document.get_collection(c) or []) for c in Collection}
    store.write_document(result.document, path, pretty_print=pretty)

    click.echo(f"Saved {path}")
    for collection, count in counts.items():
        click.echo(f"  {collection.value}: {count}")


@click.command("artifacts")
@click.argument("path")
@click.pass_context
def artifacts(ctx: click.Context, path: str):
    """List the artifact directories of a document."""
    store = _get_store(ctx)
    directory, base_name = store.split_path(path)
    root = artifacts_root(directory, base_name)

    if not store.storage.is_dir(root):
        click.echo(f"No artifacts for {path}")
        return

    click.echo(f"Artifacts: {root}")
    for collection in Collection:
        col_dir = collection_directory(directory, base_name, collection)
        if store.storage.is_dir(col_dir):
            count = len(store.storage.list_files(col_dir))
            click.echo(f"  {collection.directory_name}/: {count} file(s)")
        else:
            click.echo(f"  {collection.directory_name}/: missing")
