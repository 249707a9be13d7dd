"""Staff command line for the queue ledger."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from queueboard.config import settings
from queueboard.logging import setup_logging
from queueboard.models.enums import Outcome
from queueboard.models.ticket import TicketRow
from queueboard.services.exceptions import ServiceError
from queueboard.services.queue import QueueService
from queueboard.services.queue.factory import create_queue_service, get_ledger

T = TypeVar("T")

STATUS_COLORS = {"empty": "white", "attend": "green", "absent": "yellow"}


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a service coroutine, turning service errors into a CLI failure."""
    try:
        return asyncio.run(coro)
    except ServiceError as e:
        raise click.ClickException(str(e)) from e


def format_ticket(ticket: TicketRow) -> str:
    status = click.style(f"{ticket.status.value:<6}", fg=STATUS_COLORS[ticket.status.value])
    return f"{click.style(ticket.id, bold=True)}  {status}  {ticket.issued_at}"


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Issue tickets and move the serving pointer from a terminal."""
    setup_logging()
    if ctx.obj is None:
        ctx.obj = create_queue_service(get_ledger())


@cli.command(name="list")
@click.pass_obj
def list_command(service: QueueService) -> None:
    """List tickets in the current scope."""
    tickets = run(service.list_tickets())
    if not tickets:
        click.echo("Queue is empty.")
        return
    for ticket in tickets:
        click.echo(format_ticket(ticket))


@cli.command()
@click.pass_obj
def issue(service: QueueService) -> None:
    """Issue the next ticket."""
    ticket = run(service.issue_ticket())
    click.echo(f"Issued {click.style(ticket.id, bold=True)} at {ticket.issued_at}")


@cli.command()
@click.argument("ticket_id")
@click.option(
    "--outcome",
    type=click.Choice([o.value for o in Outcome]),
    default=Outcome.ATTEND.value,
    show_default=True,
    help="Status recorded for TICKET_ID.",
)
@click.pass_obj
def advance(service: QueueService, ticket_id: str, outcome: str) -> None:
    """Resolve TICKET_ID and print the next ticket to serve."""
    next_id = run(service.advance(ticket_id, Outcome(outcome)))
    if next_id == ticket_id:
        click.echo(f"Now serving {click.style(next_id, bold=True)} (no next ticket)")
    else:
        click.echo(f"Now serving {click.style(next_id, bold=True)}")


@cli.command()
@click.option("--current", "current_id", default=None, help="Ticket currently being served.")
@click.option("--limit", default=settings.preview_size, show_default=True, type=click.IntRange(min=0))
@click.pass_obj
def board(service: QueueService, current_id: str | None, limit: int) -> None:
    """Show the serving pointer and upcoming tickets."""
    snapshot = run(service.board(current_id, limit))
    current = snapshot.current.id if snapshot.current else "-"
    click.echo(f"Serving: {click.style(current, bold=True)}  ({snapshot.total} tickets)")
    for ticket in snapshot.upcoming:
        click.echo(f"  next: {format_ticket(ticket)}")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("queueboard.main:app", host=host, port=port, reload=reload, log_config=None)
