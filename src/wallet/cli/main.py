#!/usr/bin/env python3
"""
Main CLI Entry Point for Wallet

Runs the interactive menu shell by default, and offers one-shot commands that
load the ledger file, act on it and (for changes) save it back.
"""

import click

from ..analysis.reports import (
    category_breakdown,
    compute_totals,
    format_categories,
    list_categories,
    stats_in_range,
)
from ..core.config import Config, get_config
from ..core.currency import format_amount, parse_amount
from ..core.exceptions import WalletError
from ..core.models import DATE_FORMAT_HINT
from ..ledger.datastore import LedgerFileStore
from ..ledger.store import TransactionStore
from .menu import ShellState, run_shell


def _amount_option(ctx: click.Context, param: click.Parameter, value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _token_option(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    # Ledger fields are whitespace-delimited on disk
    if value is None:
        return None
    if not value or any(ch.isspace() for ch in value):
        raise click.BadParameter("must be a single word with no spaces")
    return value


def _transaction_options(f):
    """Shared --date/--kind/--category/--amount options for add and edit."""
    f = click.option(
        "--amount", required=True, callback=_amount_option, help="Amount, e.g. 1250.50"
    )(f)
    f = click.option("--category", required=True, callback=_token_option, help="Category label (no spaces)")(f)
    f = click.option("--kind", required=True, callback=_token_option, help="Transaction type (income/expense)")(f)
    f = click.option(
        "--date",
        "date_str",
        required=True,
        callback=_token_option,
        help=f"Transaction date ({DATE_FORMAT_HINT})",
    )(f)
    return f


def _open_ledger(config: Config, strict: bool = False) -> tuple[TransactionStore, LedgerFileStore]:
    """
    Load the configured ledger file; a missing file is an empty ledger.

    Commands that save the ledger back pass strict, so a file with a malformed
    record is refused instead of being rewritten without its unread entries.
    """
    store = TransactionStore()
    datastore = LedgerFileStore(config.ledger_path)
    if datastore.exists():
        try:
            datastore.load_into(store, strict=strict)
        except WalletError as e:
            raise click.ClickException(str(e)) from e
    return store, datastore


def _save_ledger(store: TransactionStore, datastore: LedgerFileStore) -> None:
    try:
        datastore.save_from(store)
    except WalletError as e:
        raise click.ClickException(str(e)) from e


@click.group(invoke_without_command=True)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Wallet - Personal Finance Ledger

    Records income and expense transactions, keeps them in a plain text
    ledger file and reports totals and statistics. Run without a command to
    start the interactive menu.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        import os

        from ..core.config import reload_config

        os.environ["WALLET_ENV"] = config_env
        reload_config()

    # Configure debug logging if requested
    if debug:
        import logging

        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("wallet").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Ledger file: {ctx.obj['config'].ledger_path}")

    if debug:
        click.echo("Debug logging enabled")

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Run the interactive numbered menu."""
    config = ctx.obj["config"]
    state = ShellState(store=TransactionStore(), datastore=LedgerFileStore(config.ledger_path))
    run_shell(state)


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from wallet import __author__, __version__

    click.echo(f"Wallet v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Ledger File: {config_obj.ledger_path}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the state of the ledger file on disk."""
    summary = LedgerFileStore(ctx.obj["config"].ledger_path).to_summary()

    click.echo(summary.summary_text)
    if summary.exists:
        click.echo(f"  Size: {summary.size_bytes} bytes")
        click.echo(f"  Last Updated: {summary.last_updated:%Y-%m-%d %H:%M:%S} ({summary.age_days} days ago)")


@main.command()
@_transaction_options
@click.pass_context
def add(ctx: click.Context, date_str: str, kind: str, category: str, amount: float) -> None:
    """
    Add a transaction to the ledger file.

    Example:
      wallet add --date 2024/01/05 --kind income --category salary --amount 2500
    """
    store, datastore = _open_ledger(ctx.obj["config"], strict=True)
    store.add_transaction(date_str, kind, category, amount)
    _save_ledger(store, datastore)
    click.echo("Entry added successfully.")


@main.command()
@click.argument("index", type=int)
@_transaction_options
@click.pass_context
def edit(ctx: click.Context, index: int, date_str: str, kind: str, category: str, amount: float) -> None:
    """
    Replace the transaction at INDEX (0-based, see `wallet list`).

    Example:
      wallet edit 2 --date 2024/01/07 --kind expense --category rent --amount 900
    """
    store, datastore = _open_ledger(ctx.obj["config"], strict=True)
    try:
        store.edit_transaction(index, date_str, kind, category, amount)
    except WalletError as e:
        raise click.ClickException(str(e)) from e
    _save_ledger(store, datastore)
    click.echo("Entry edited successfully.")


@main.command()
@click.argument("index", type=int)
@click.pass_context
def delete(ctx: click.Context, index: int) -> None:
    """Delete the transaction at INDEX (0-based, see `wallet list`)."""
    store, datastore = _open_ledger(ctx.obj["config"], strict=True)
    try:
        store.delete_transaction(index)
    except WalletError as e:
        raise click.ClickException(str(e)) from e
    _save_ledger(store, datastore)
    click.echo("Entry deleted successfully.")


@main.command(name="list")
@click.pass_context
def list_entries(ctx: click.Context) -> None:
    """List transactions with their indexes."""
    store, _ = _open_ledger(ctx.obj["config"])

    if not len(store):
        click.echo("No transactions recorded.")
        return

    for index, transaction in enumerate(store):
        click.echo(
            f"{index:>4}  {transaction.date:<10}  {transaction.kind:<7}  "
            f"{transaction.category:<19}  {format_amount(transaction.amount):>12}"
        )


@main.command()
@click.pass_context
def totals(ctx: click.Context) -> None:
    """Show total income, expenses, balance and the largest expense."""
    store, _ = _open_ledger(ctx.obj["config"])
    for line in compute_totals(store).to_lines():
        click.echo(line)


@main.command()
@click.argument("start_date")
@click.argument("end_date")
@click.pass_context
def stats(ctx: click.Context, start_date: str, end_date: str) -> None:
    """
    Show income and expenses dated from START_DATE to END_DATE inclusive.

    Dates are compared as text, so use zero-padded YYYY/MM/DD.

    Example:
      wallet stats 2024/01/01 2024/01/31
    """
    store, _ = _open_ledger(ctx.obj["config"])
    for line in stats_in_range(store, start_date, end_date).to_lines():
        click.echo(line)


@main.command()
@click.pass_context
def categories(ctx: click.Context) -> None:
    """List categories in the order they were first seen."""
    store, _ = _open_ledger(ctx.obj["config"])
    for line in format_categories(list_categories(store)):
        click.echo(line)


@main.command()
@click.pass_context
def breakdown(ctx: click.Context) -> None:
    """Show totals and counts per category for income and expenses."""
    store, _ = _open_ledger(ctx.obj["config"])
    df = category_breakdown(store)

    if df.empty:
        click.echo("No income or expense transactions recorded.")
        return

    click.echo(df.to_string(index=False, formatters={"total": format_amount}))


if __name__ == "__main__":
    main()
