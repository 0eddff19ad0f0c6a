"""
WKS CLI Main Entry Point

Usage:
    wks show <path> [--json-out] [--strict]
    wks save <path> [--pretty/--compact]
    wks artifacts <path>
"""
from __future__ import annotations

import logging
from typing import Optional

import click

from .. import __version__
from ..config import clear_config_cache, get_config_path, get_logging_settings, set_config_path
from ..store import DocumentStore, reset_default_store


@click.group()
@click.version_option(version=__version__, prog_name="wks")
@click.option("--config", "config_path", default=None, help="Path to config YAML (default: WKS_CONFIG_PATH)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """WKS CLI - Workspace document storage tools."""
    if config_path:
        previous = get_config_path()
        set_config_path(config_path)
        clear_config_cache()
        reset_default_store()

        @ctx.call_on_close
        def _restore_config():
            set_config_path(previous)
            clear_config_cache()
            reset_default_store()

    level = "DEBUG" if verbose else str(get_logging_settings().get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj.setdefault("store", DocumentStore())


# Register document commands
from .doc_cmds import artifacts, save, show  # noqa: E402

cli.add_command(show)
cli.add_command(save)
cli.add_command(artifacts)


# Entry point
def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
