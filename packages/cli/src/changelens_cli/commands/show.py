"""show command — render change documents for reading."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from changelens_cli.input import read_records
from changelens_core.context import ParseContext
from changelens_core.dates import format_last_updated, format_timestamp
from changelens_core.models import CommitRecord, Committer, Reviewer, Status
from changelens_core.strings import explain

console = Console()

_STATUS_STYLE = {
    Status.NEW: "green",
    Status.SUBMITTED: "yellow",
    Status.MERGED: "cyan",
    Status.ABANDONED: "red",
}


def _status_label(record: CommitRecord) -> str:
    if record.status is None:
        return "?"
    style = _STATUS_STYLE.get(record.status, "white")
    return f"[{style}]{record.status.name}[/{style}]"


def _account(committer: Committer | None) -> str:
    if committer is None:
        return ""
    text = f"{committer.name} <{committer.email}>" if committer.email else committer.name
    return escape(text)


def _vote(reviewer: Reviewer) -> str:
    value = reviewer.vote_value
    if value is None:
        return "-"
    if value > 0:
        return f"[green]+{value}[/green]"
    if value < 0:
        return f"[red]{value}[/red]"
    return "0"


def _print_detail(record: CommitRecord, context: ParseContext) -> None:
    header = Table.grid(padding=(0, 2))
    header.add_column(style="bold")
    header.add_column()
    header.add_row("Subject", escape(record.subject or ""))
    status = _status_label(record)
    if record.status is not None:
        status += f"  {explain(record.status, context.strings)}"
    header.add_row("Status", status)
    header.add_row("Project", escape(f"{record.project or ''} ({record.branch or ''})"))
    header.add_row("Owner", _account(record.owner))
    header.add_row("Author", _account(record.author))
    header.add_row("Committer", _account(record.committer))
    if record.revision_resolved:
        header.add_row("Patch set", str(record.patch_set_number))
    header.add_row("Mergeable", "yes" if record.is_mergeable else "no")
    header.add_row("Updated", format_last_updated(record, context) or "")
    header.add_row("Link", record.web_address or "")
    console.print(header)

    if record.message:
        console.print(f"\n{escape(record.message.rstrip())}\n", highlight=False)

    if record.verified_reviewers or record.code_reviewers:
        votes = Table(title="Reviewers", show_header=True, header_style="bold cyan")
        votes.add_column("Label")
        votes.add_column("Reviewer")
        votes.add_column("Vote", justify="right")
        for label, reviewers in (("Verified", record.verified_reviewers), ("Code-Review", record.code_reviewers)):
            for reviewer in reviewers:
                votes.add_row(label, _account(Committer(reviewer.name, reviewer.email)), _vote(reviewer))
        console.print(votes)

    if record.changed_files:
        files = Table(title="Changed files", show_header=True, header_style="bold cyan")
        files.add_column("File")
        files.add_column("+", justify="right", style="green")
        files.add_column("-", justify="right", style="red")
        for changed in record.changed_files:
            if changed.is_placeholder:
                files.add_row(f"[dim]{escape(changed.draft_notice)}[/dim]", "", "")
                continue
            name = f"{changed.old_path} -> {changed.path}" if changed.old_path else changed.path
            files.add_row(
                escape(name),
                "" if changed.lines_inserted is None else str(changed.lines_inserted),
                "" if changed.lines_deleted is None else str(changed.lines_deleted),
            )
        console.print(files)

    for comment in record.messages:
        author = escape(comment.author.name) if comment.author else "Gerrit"
        when = format_timestamp(comment.date, context) or ""
        console.print(f"[bold]{author}[/bold] [dim]{when}[/dim]")
        console.print(f"  {escape(comment.message or '')}", highlight=False)


def _print_summary(records: list[CommitRecord], context: ParseContext) -> None:
    table = Table(title=f"{len(records)} changes", show_header=True, header_style="bold cyan")
    table.add_column("#", style="bold", justify="right")
    table.add_column("Status", width=10)
    table.add_column("Subject", max_width=50)
    table.add_column("Owner")
    table.add_column("Updated")
    for r in records:
        table.add_row(
            str(r.commit_number) if r.commit_number is not None else "?",
            _status_label(r),
            escape(r.subject or ""),
            escape(r.owner.name),
            format_last_updated(r, context) or "",
        )
    console.print(table)


@click.command("show")
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def show_cmd(ctx, source):
    """Show the changes in SOURCE (a saved Gerrit response, or - for stdin).

    A single change is shown in detail; several are listed in a table.
    """
    context = ctx.obj["context"]
    records = read_records(source, context)
    if not records:
        console.print("[yellow]No changes found.[/yellow]")
        return
    if len(records) == 1:
        _print_detail(records[0], context)
    else:
        _print_summary(records, context)
