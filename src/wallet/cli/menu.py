#!/usr/bin/env python3
"""
Interactive Menu Shell

The numbered wallet menu as explicit state plus a dispatch function. The
shell loop in cli.main reads a choice, calls dispatch() and echoes the lines
it returns; the store itself never touches the console or the file system.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

import click

from ..analysis.reports import compute_totals, format_categories, list_categories, stats_in_range
from ..core.currency import parse_amount
from ..core.exceptions import WalletError
from ..core.models import DATE_FORMAT_HINT
from ..ledger.datastore import LedgerFileStore
from ..ledger.store import TransactionStore

logger = logging.getLogger(__name__)


class MenuAction(IntEnum):
    """Numbered menu entries."""

    LOAD = 1
    SAVE = 2
    ADD = 3
    EDIT = 4
    DELETE = 5
    TOTALS = 6
    STATS = 7
    CATEGORIES = 8
    EXIT = 9


MENU_LABELS = {
    MenuAction.LOAD: "Load Database",
    MenuAction.SAVE: "Save Database",
    MenuAction.ADD: "Add Entry",
    MenuAction.EDIT: "Edit Entry",
    MenuAction.DELETE: "Delete Entry",
    MenuAction.TOTALS: "Display Totals",
    MenuAction.STATS: "Display Statistics",
    MenuAction.CATEGORIES: "List Categories",
    MenuAction.EXIT: "Exit",
}

INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."


class Prompter(Protocol):
    """Source of user input for menu actions."""

    def text(self, label: str) -> str:
        """Read one whitespace-free token."""
        ...

    def amount(self, label: str) -> float:
        """Read an amount."""
        ...

    def index(self, label: str) -> int:
        """Read a 0-based entry index."""
        ...


class ClickPrompter:
    """Prompter reading from the console via click."""

    def text(self, label: str) -> str:
        while True:
            tokens = click.prompt(label, type=str, prompt_suffix=": ").split()
            # Only the first token is kept, fields cannot contain whitespace
            if tokens:
                return tokens[0]

    def amount(self, label: str) -> float:
        while True:
            value = click.prompt(label, type=str, prompt_suffix=": ")
            try:
                return parse_amount(value)
            except ValueError:
                click.echo("Invalid amount. Please enter a number (e.g., 1250.50)")

    def index(self, label: str) -> int:
        return click.prompt(label, type=int, prompt_suffix=": ")


@dataclass
class ShellState:
    """Everything the menu shell works on."""

    store: TransactionStore
    datastore: LedgerFileStore
    running: bool = True


def render_menu() -> list[str]:
    """Menu text, one line per entry."""
    lines = ["", "Wallet Program Menu:"]
    lines.extend(f"{action.value}. {MENU_LABELS[action]}" for action in MenuAction)
    return lines


def parse_choice(raw: str) -> MenuAction | None:
    """Map raw menu input to an action, or None if it isn't one."""
    try:
        return MenuAction(int(raw.strip()))
    except ValueError:
        return None


def _prompt_fields(prompter: Prompter, prefix: str = "") -> tuple[str, str, str, float]:
    date = prompter.text(f"Enter {prefix}date ({DATE_FORMAT_HINT})")
    kind = prompter.text(f"Enter {prefix}type (income/expense)")
    category = prompter.text(f"Enter {prefix}category")
    amount = prompter.amount(f"Enter {prefix}amount")
    return date, kind, category, amount


def dispatch(state: ShellState, action: MenuAction, prompter: Prompter) -> list[str]:
    """
    Perform one menu action.

    Wallet errors are reported in the returned lines rather than raised, so
    the shell always carries on.

    Returns:
        Output lines for the user
    """
    logger.debug(f"Dispatching menu action {action.name}")
    try:
        return _ACTIONS[action](state, prompter)
    except WalletError as e:
        logger.debug(f"Menu action {action.name} failed: {e}")
        return [str(e)]


def _load(state: ShellState, prompter: Prompter) -> list[str]:
    state.datastore.load_into(state.store)
    return ["Database loaded successfully."]


def _save(state: ShellState, prompter: Prompter) -> list[str]:
    state.datastore.save_from(state.store)
    return ["Database saved successfully."]


def _add(state: ShellState, prompter: Prompter) -> list[str]:
    state.store.add_transaction(*_prompt_fields(prompter))
    return ["Entry added successfully."]


def _edit(state: ShellState, prompter: Prompter) -> list[str]:
    index = prompter.index("Enter index to edit")
    fields = _prompt_fields(prompter, prefix="new ")
    state.store.edit_transaction(index, *fields)
    return ["Entry edited successfully."]


def _delete(state: ShellState, prompter: Prompter) -> list[str]:
    index = prompter.index("Enter index to delete")
    state.store.delete_transaction(index)
    return ["Entry deleted successfully."]


def _totals(state: ShellState, prompter: Prompter) -> list[str]:
    return compute_totals(state.store).to_lines()


def _stats(state: ShellState, prompter: Prompter) -> list[str]:
    start_date = prompter.text(f"Enter start date ({DATE_FORMAT_HINT})")
    end_date = prompter.text(f"Enter end date ({DATE_FORMAT_HINT})")
    return stats_in_range(state.store, start_date, end_date).to_lines()


def _categories(state: ShellState, prompter: Prompter) -> list[str]:
    return format_categories(list_categories(state.store))


def _exit(state: ShellState, prompter: Prompter) -> list[str]:
    state.running = False
    return ["Exiting program."]


_ACTIONS = {
    MenuAction.LOAD: _load,
    MenuAction.SAVE: _save,
    MenuAction.ADD: _add,
    MenuAction.EDIT: _edit,
    MenuAction.DELETE: _delete,
    MenuAction.TOTALS: _totals,
    MenuAction.STATS: _stats,
    MenuAction.CATEGORIES: _categories,
    MenuAction.EXIT: _exit,
}


def run_shell(state: ShellState, prompter: Prompter | None = None) -> None:
    """Show the menu and handle choices until Exit is chosen."""
    prompter = prompter or ClickPrompter()

    while state.running:
        for line in render_menu():
            click.echo(line)

        raw = click.prompt("Enter your choice", type=str, prompt_suffix=": ")
        action = parse_choice(raw)
        if action is None:
            click.echo(INVALID_CHOICE_MESSAGE)
            continue

        for line in dispatch(state, action, prompter):
            click.echo(line)
