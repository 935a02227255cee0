from __future__ import annotations

import logging
import pathlib
import sys
from typing import List, Optional

import typer
import structlog
from rich.console import Console

from .config import load_config, config_from_env, CnpjAlfaConfig
from .core import apply_mask
from .engine.batch import check_digits_many, validate_many

console = Console(highlight=False, markup=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, markup=False, soft_wrap=True)
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="cnpjalfa — alphanumeric CNPJ validator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"cnpjalfa {__version__}")
        raise typer.Exit()


def configure_logging(cfg: CnpjAlfaConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level)
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.logging.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .cnpjalfa.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    cfg = load_config(config) if config else config_from_env()
    configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def validate(
    ctx: typer.Context,
    cnpjs: List[str] = typer.Argument(..., help="CNPJs to validate (masked or not)"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any CNPJ is invalid"),
):
    """Validate full CNPJs (12 alphanumerics + 2 check digits)."""
    cfg: CnpjAlfaConfig = ctx.obj["config"]
    result = validate_many(cnpjs)
    for item in result.items:
        shown = item.raw.upper()
        if item.valid:
            console.print(f"[{item.index}] CNPJ: [{shown}] {cfg.output.valid_symbol} valid")
        else:
            console.print(f"[{item.index}] CNPJ: [{shown}] {cfg.output.invalid_symbol} invalid")
    if strict and result.failures:
        raise typer.Exit(code=1)


@app.command()
def dv(
    ctx: typer.Context,
    bases: List[str] = typer.Argument(..., help="12-character CNPJ bases (masked or not)"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any base is rejected"),
):
    """Compute the check digits of each base and print the full CNPJ."""
    cfg: CnpjAlfaConfig = ctx.obj["config"]
    result = check_digits_many(bases)
    for item in result.items:
        shown = item.raw.upper()
        if not item.ok:
            err_console.print(f"[{item.index}] Error computing DV for CNPJ [{shown}]: {item.error}")
            continue
        full = apply_mask(item.full) if cfg.output.apply_mask else item.full
        console.print(f"[{item.index}] CNPJ: [{shown}] DV: [{item.check_digits}]")
        console.print(f"    Full CNPJ: {full}")
    if strict and result.failures:
        raise typer.Exit(code=1)
