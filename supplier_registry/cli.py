"""Supplier Registry CLI — drive the registry from a local host environment."""

import sys

import click
from rich.console import Console
from rich.table import Table

from supplier_registry import __version__
from supplier_registry.config import load_settings
from supplier_registry.core.models import Result
from supplier_registry.logging_config import configure_logging
from supplier_registry.store.file_store import RegistryStore

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False), help="YAML settings file")
@click.option("--state", "state_path", default=None, help="Registry state file (overrides settings)")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, state_path: str | None):
    """Supplier Registry — supplier onboarding and verification.

    Suppliers register themselves once; the administrator verifies
    registered suppliers with a score.
    """
    settings = load_settings(config_path)
    configure_logging(settings.log_level, settings.log_json)

    ctx.obj = {
        "settings": settings,
        "store": RegistryStore(state_path or settings.state_path),
    }


def _report(result: Result, success: str) -> None:
    if result.is_ok:
        console.print(f"  [green]ok[/] {success}")
        return
    console.print(f"  [red]err[/] {result.error.label} (code {result.value})")
    sys.exit(1)


# ── Register ─────────────────────────────────────────────────────────


@main.command()
@click.argument("company_name")
@click.argument("industry")
@click.option("--as", "sender", required=True, help="Identity sending the call")
@click.pass_obj
def register(obj: dict, company_name: str, industry: str, sender: str):
    """Register SENDER as a supplier named COMPANY_NAME in INDUSTRY."""
    store = obj["store"]
    env = store.load(obj["settings"].admin)

    env.as_sender(sender).advance()
    result = env.register_supplier(company_name, industry)
    store.save(env)

    _report(result, f"{sender} registered at height {env.height}")


# ── Verify ───────────────────────────────────────────────────────────


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("supplier")
@click.argument("score", type=int)
@click.option("--as", "sender", required=True, help="Identity sending the call")
@click.pass_obj
def verify(obj: dict, supplier: str, score: int, sender: str):
    """Verify SUPPLIER with SCORE. Only the administrator may do this."""
    store = obj["store"]
    env = store.load(obj["settings"].admin)

    env.as_sender(sender).advance()
    result = env.verify_supplier(supplier, score)
    store.save(env)

    _report(result, f"{supplier} verified with score {score} at height {env.height}")


# ── Reads ────────────────────────────────────────────────────────────


@main.command()
@click.argument("supplier")
@click.pass_obj
def status(obj: dict, supplier: str):
    """Show whether SUPPLIER is registered and verified."""
    env = obj["store"].load(obj["settings"].admin)

    def flag(value: bool) -> str:
        return "[green]Y[/]" if value else "[red]N[/]"

    console.print(f"  Registered: {flag(env.is_supplier_registered(supplier))}")
    console.print(f"  Verified:   {flag(env.is_supplier_verified(supplier))}")


@main.command()
@click.argument("supplier")
@click.pass_obj
def show(obj: dict, supplier: str):
    """Show the full record for SUPPLIER."""
    env = obj["store"].load(obj["settings"].admin)
    record = env.get_supplier_details(supplier)

    if record is None:
        console.print(f"[yellow]Supplier not found:[/] {supplier}")
        return

    table = Table(title=supplier)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Company", record.company_name)
    table.add_row("Industry", record.industry)
    table.add_row("Verified", "[green]Y[/]" if record.is_verified else "[red]N[/]")
    table.add_row("Score", str(record.verification_score))
    table.add_row("Height", str(record.verification_height))

    console.print(table)


if __name__ == "__main__":
    main()
