"""To-do list CLI that keeps its data in an ilo-config file.

Usage:

    python examples/todo_list.py add "Finish sketch of skyeels"
    python examples/todo_list.py add "Get directions to the Palanaeum"
    python examples/todo_list.py list
    python examples/todo_list.py do 1  # Mark "Finish sketch of skyeels" complete

Configs usually hold links and credentials to other data stores, but for a
small program it is an easy way to keep data on disk directly. Backups and
delete protection are up to the caller.
"""

from __future__ import annotations

import click

from ilo_config import Config, ConfigError

CONFIG_NAME = "axesilo-example-todo-list"

TodoList = list[tuple[str, bool]]


def _load() -> Config[TodoList]:
    try:
        return Config.load(CONFIG_NAME, TodoList)
    except ConfigError as e:
        raise click.ClickException(f"Failed to load todo list: {e}") from e


def _save(config: Config[TodoList]) -> None:
    try:
        config.save()
    except ConfigError as e:
        raise click.ClickException(f"Failed to save todo list: {e}") from e


@click.group()
def cli() -> None:
    """Minimal to-do list."""


@cli.command()
@click.argument("item")
def add(item: str) -> None:
    """Add ITEM to the list."""
    config = _load()
    todo_list = config.data_mut()
    todo_list.append((item, False))
    _save(config)
    click.echo(f'Added "{item}" to the todo list at position {len(todo_list)}.')


@cli.command(name="list")
def list_items() -> None:
    """Show all items."""
    for i, (item, done) in enumerate(_load().data, start=1):
        click.echo(f"{'(DONE)' if done else '':8} | {i:>6} | {item}")


@cli.command(name="do")
@click.argument("number", type=int)
def do_item(number: int) -> None:
    """Mark item NUMBER (1-based) as complete."""
    config = _load()
    todo_list = config.data_mut()
    if number < 1 or number > len(todo_list) or todo_list[number - 1][1]:
        click.echo("Please enter the index of an incomplete item.")
        return
    item = todo_list[number - 1][0]
    todo_list[number - 1] = (item, True)
    _save(config)
    click.echo(f'Marked "{item}" as complete!')


if __name__ == "__main__":
    cli()
