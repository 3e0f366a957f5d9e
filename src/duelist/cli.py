"""duelist CLI - task list with due dates."""

import json
import logging
import sys

import click

from .config import Config, load_config
from .core.display import EMPTY_STATE, format_summary, format_task_line
from .core.engine import TaskListEngine
from .core.errors import TaskError
from .core.view import SortKey, StatusFilter
from .ports.task_store import TaskStore
from .workflows import commit, default_view, open_engine

FILTER_CHOICES = [f.value for f in StatusFilter]
SORT_CHOICES = [s.value for s in SortKey]


@click.group()
@click.version_option(package_name="duelist")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """duelist - task list with due dates."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _open() -> tuple[Config, TaskListEngine, TaskStore]:
    config = load_config()
    engine, store = open_engine(config)
    return config, engine, store


def _save(engine: TaskListEngine, store: TaskStore) -> None:
    if not commit(engine, store):
        click.echo("Warning: changes could not be saved", err=True)


def _confirm(config: Config, yes: bool, question: str) -> bool:
    if yes or not config.confirm_destructive:
        return True
    return click.confirm(question, default=False)


@main.command()
@click.argument("text")
@click.option("--due", "due_date", prompt="Due date (YYYY-MM-DD)", help="Due date (YYYY-MM-DD)")
def add(text: str, due_date: str):
    """Add a task."""
    config, engine, store = _open()
    try:
        task = engine.add(text, due_date)
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _save(engine, store)
    click.echo(f"Added: {format_task_line(task)}")


@main.command("list")
@click.option("--search", "-s", default="", help="Only tasks containing this text")
@click.option("--filter", "-f", "status", type=click.Choice(FILTER_CHOICES), default=None,
              help="Status filter (default from config)")
@click.option("--sort", type=click.Choice(SORT_CHOICES), default=None,
              help="Sort order (default from config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tasks(search: str, status: str | None, sort: str | None, as_json: bool):
    """List tasks."""
    config, engine, _ = _open()
    try:
        view = default_view(config, search, status, sort)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    visible = engine.project(view)

    if as_json:
        click.echo(
            json.dumps(
                [{**t.to_dict(), "status": t.status().value} for t in visible],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    if not len(engine):
        click.echo(EMPTY_STATE)
        return

    if not visible:
        click.echo("No matching tasks.")
    for task in visible:
        click.echo(format_task_line(task))
    click.echo()
    click.echo(format_summary(engine.counts()))


@main.command()
@click.argument("task_id", type=int)
def toggle(task_id: int):
    """Mark a task complete (or not complete)."""
    config, engine, store = _open()
    task = engine.get(task_id)
    if task is None:
        return

    engine.toggle(task_id)
    _save(engine, store)
    click.echo(format_task_line(task))


@main.command()
@click.argument("task_id", type=int)
@click.option("--text", "new_text", default=None, help="New task text")
@click.option("--due", "new_due", default=None, help="New due date (YYYY-MM-DD)")
def edit(task_id: int, new_text: str | None, new_due: str | None):
    """Edit a task's text and due date."""
    config, engine, store = _open()

    task = engine.get(task_id)
    if task is not None:
        if new_text is None:
            new_text = click.prompt("Edit your task", default=task.text)
        if new_due is None:
            current = task.due_date.isoformat() if task.due_date else ""
            new_due = click.prompt("Edit due date (YYYY-MM-DD)", default=current)

    try:
        task = engine.edit(task_id, new_text or "", new_due or "")
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _save(engine, store)
    click.echo(f"Updated: {format_task_line(task)}")


@main.command()
@click.argument("task_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(task_id: int, yes: bool):
    """Delete a task."""
    config, engine, store = _open()
    if engine.get(task_id) is None:
        click.echo(f"No task with id {task_id}.")
        return

    if not _confirm(config, yes, "Are you sure you want to delete this task?"):
        click.echo("Cancelled.")
        return

    engine.delete(task_id)
    _save(engine, store)
    click.echo(f"Deleted task {task_id}.")


@main.command("clear-completed")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def clear_completed(yes: bool):
    """Delete all completed tasks."""
    config, engine, store = _open()
    completed = sum(1 for t in engine.tasks if t.completed)
    if completed == 0:
        click.echo("No completed tasks to clear!")
        return

    if not _confirm(config, yes, f"Are you sure you want to delete {completed} completed task(s)?"):
        click.echo("Cancelled.")
        return

    removed = engine.clear_completed()
    _save(engine, store)
    click.echo(f"Cleared {removed} completed task(s).")


@main.command("clear-all")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def clear_all(yes: bool):
    """Delete every task."""
    config, engine, store = _open()
    if not len(engine):
        click.echo("No tasks to clear!")
        return

    if not _confirm(config, yes, "Are you sure you want to delete ALL tasks?"):
        click.echo("Cancelled.")
        return

    removed = engine.clear_all()
    _save(engine, store)
    click.echo(f"Cleared {removed} task(s).")


if __name__ == "__main__":
    main()
