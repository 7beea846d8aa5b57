"""Typer CLI entry point for CareerHub."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from careerhub.config import load_config
from careerhub.errors import JobNotFoundError, StorageError
from careerhub.models import JobInput, JobStatus, JobType
from careerhub.views import STATUS_LABELS

app = typer.Typer(
    name="careerhub",
    help="CareerHub internal job board",
    no_args_is_help=True,
)
console = Console()

STATUS_STYLES = {
    JobStatus.OPEN: "green",
    JobStatus.CLOSED: "red",
    JobStatus.ARCHIVED: "dim",
}


def _get_config():
    config = load_config(Path("config.yaml"))
    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    return config


def _get_store():
    from careerhub.storage import SqliteStorage, init_db
    from careerhub.store import JobStore

    config = _get_config()
    engine = init_db(config.storage.db_path)
    return JobStore(SqliteStorage(engine), key=config.storage.slot_key)


def _get_llm_client():
    """Get LLM client if available, or None."""
    config = _get_config()
    if not config.llm.enabled:
        return None

    from careerhub.llm import get_llm_client

    client = get_llm_client(config.llm)
    if client.available:
        return client
    return None


def _list_jobs(store):
    try:
        return store.list()
    except StorageError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def _format_timestamp(ms: int) -> str:
    from datetime import datetime

    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


def _parse_status(value: str | None) -> JobStatus | None:
    if value is None or value.upper() == "ALL":
        return None
    try:
        return JobStatus(value.upper())
    except ValueError:
        valid = ", ".join(s.value.lower() for s in JobStatus)
        console.print(f"[red]Invalid status: {escape(value)}[/red]. Valid: all, {valid}")
        raise typer.Exit(1)


def _parse_stored_status(value: str) -> JobStatus:
    status = _parse_status(value)
    if status is None:
        console.print("[red]Status 'all' cannot be stored[/red]")
        raise typer.Exit(1)
    return status


def _parse_type(value: str) -> JobType:
    for job_type in JobType:
        if value.lower() in (job_type.value.lower(), job_type.name.lower()):
            return job_type
    valid = ", ".join(t.value for t in JobType)
    console.print(f"[red]Invalid job type: {escape(value)}[/red]. Valid: {valid}")
    raise typer.Exit(1)


def _status_text(status: JobStatus) -> Text:
    return Text(status.value, style=STATUS_STYLES[status])


@app.command()
def jobs(
    search: str = typer.Option("", "--search", "-q", help="Match title or department"),
    status: str | None = typer.Option(None, "--status", "-s", help="open, closed, archived or all"),
):
    """List job postings."""
    from careerhub.views import filter_jobs

    tab = _parse_status(status)
    job_list = filter_jobs(_list_jobs(_get_store()), search=search, status=tab)

    if not job_list:
        console.print("[yellow]No jobs found.[/yellow]")
        return

    table = Table(title=f"Jobs ({len(job_list)} results)")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold", max_width=35)
    table.add_column("Department", max_width=20)
    table.add_column("Location", max_width=20)
    table.add_column("Type", width=10)
    table.add_column("Status", width=9)
    table.add_column("Updated", width=16)

    for job in job_list:
        table.add_row(
            job.id,
            escape(job.title),
            escape(job.department),
            escape(job.location),
            job.type.value,
            _status_text(job.status),
            _format_timestamp(job.updated_at),
        )

    console.print(table)


@app.command()
def show(job_id: str = typer.Argument(help="Job ID")):
    """Show job details."""
    store = _get_store()
    _list_jobs(store)
    job = store.get_by_id(job_id)
    if job is None:
        console.print(f"[red]Job not found: {escape(job_id)}[/red]")
        raise typer.Exit(1)

    panel_content = (
        f"[bold]{escape(job.title)}[/bold]\n"
        f"Department: {escape(job.department)}\n"
        f"Location: {escape(job.location)}\n"
        f"Type: {job.type.value}\n"
        f"Status: {STATUS_LABELS[job.status]}\n"
    )
    if job.salary_range:
        panel_content += f"Salary: {escape(job.salary_range)}\n"
    panel_content += (
        f"Created: {_format_timestamp(job.created_at)}\n"
        f"Updated: {_format_timestamp(job.updated_at)}"
    )
    console.print(Panel(panel_content, title=f"Job {job.id}", expand=False))

    if job.description:
        console.print(f"\n[bold]Description:[/bold]\n{escape(job.description)}")
    if job.requirements:
        console.print("\n[bold]Requirements:[/bold]")
        for req in job.requirements:
            console.print(f"  • {escape(req)}")


@app.command()
def create(
    title: str = typer.Option(..., "--title", help="Job title"),
    department: str = typer.Option(..., "--department", "-d", help="Department"),
    location: str = typer.Option(..., "--location", "-l", help="Location"),
    job_type: str = typer.Option("Full-time", "--type", help="Full-time, Part-time, Contract or Intern"),
    description: str = typer.Option("", "--description", help="Job description"),
    requirements: list[str] | None = typer.Option(None, "--requirement", "-r", help="Requirement (repeatable)"),
    salary: str | None = typer.Option(None, "--salary", help="Salary range"),
    status: str = typer.Option("open", "--status", "-s", help="open, closed or archived"),
    polish: bool = typer.Option(False, "--polish", help="Polish the description with the LLM first"),
):
    """Create a job posting."""
    job_status = _parse_stored_status(status)
    if polish:
        description = _polish(title, description)

    data = JobInput(
        title=title,
        department=department,
        location=location,
        type=_parse_type(job_type),
        description=description,
        requirements=requirements or [],
        salary_range=salary,
        status=job_status,
    )
    store = _get_store()
    _list_jobs(store)
    job = store.create(data)
    console.print(f"[green]Created[/green] [bold]{escape(job.title)}[/bold] ({job.id})")


@app.command()
def edit(
    job_id: str = typer.Argument(help="Job ID"),
    title: str | None = typer.Option(None, "--title"),
    department: str | None = typer.Option(None, "--department", "-d"),
    location: str | None = typer.Option(None, "--location", "-l"),
    job_type: str | None = typer.Option(None, "--type"),
    description: str | None = typer.Option(None, "--description"),
    requirements: list[str] | None = typer.Option(None, "--requirement", "-r", help="Replaces all requirements"),
    salary: str | None = typer.Option(None, "--salary"),
    status: str | None = typer.Option(None, "--status", "-s"),
):
    """Edit fields of a job posting. Only the given options change."""
    fields = {
        "title": title,
        "department": department,
        "location": location,
        "description": description,
        "salary_range": salary,
    }
    fields = {k: v for k, v in fields.items() if v is not None}
    if job_type is not None:
        fields["type"] = _parse_type(job_type)
    if requirements:
        fields["requirements"] = requirements
    if status is not None:
        fields["status"] = _parse_stored_status(status)

    if not fields:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    store = _get_store()
    _list_jobs(store)
    try:
        job = store.update(job_id, fields)
    except JobNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Updated[/green] [bold]{escape(job.title)}[/bold]: {', '.join(sorted(fields))}")


@app.command()
def archive(job_id: str = typer.Argument(help="Job ID")):
    """Archive a job posting."""
    store = _get_store()
    _list_jobs(store)
    try:
        job = store.archive(job_id)
    except JobNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[bold]{escape(job.title)}[/bold] → {job.status.value}")


@app.command()
def delete(
    job_id: str = typer.Argument(help="Job ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Permanently delete a job posting."""
    if not yes:
        typer.confirm(f"Delete job {job_id} permanently?", abort=True)
    store = _get_store()
    _list_jobs(store)
    store.delete(job_id)
    console.print(f"Deleted {escape(job_id)}")


@app.command()
def export(
    output_dir: Path | None = typer.Option(None, "--output-dir", "-o", help="Directory for the backup file"),
):
    """Export all jobs to a dated JSON backup file."""
    from careerhub.export import write_export

    config = _get_config()
    path = write_export(_list_jobs(_get_store()), output_dir or Path(config.export.output_dir))
    console.print(f"[green]Exported to[/green] {path}")


@app.command()
def reset(yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation")):
    """Clear all stored jobs; the sample jobs come back on next use."""
    if not yes:
        typer.confirm("Replace all jobs with the sample data?", abort=True)
    _get_store().reset()
    console.print("[green]Storage cleared.[/green]")


@app.command()
def polish(
    job_id: str | None = typer.Option(None, "--job", "-j", help="Polish a stored job's description"),
    title: str | None = typer.Option(None, "--title"),
    description: str | None = typer.Option(None, "--description"),
    save: bool = typer.Option(False, "--save", help="Write the result back to the stored job"),
):
    """Rewrite a job description with the LLM."""
    store = None
    if job_id:
        store = _get_store()
        _list_jobs(store)
        job = store.get_by_id(job_id)
        if job is None:
            console.print(f"[red]Job not found: {escape(job_id)}[/red]")
            raise typer.Exit(1)
        title, description = job.title, job.description
    elif not (title and description):
        console.print("[red]Give --job, or both --title and --description[/red]")
        raise typer.Exit(1)

    polished = _polish(title, description)
    console.print(Panel(escape(polished), title=escape(title), expand=False))

    if save and store is not None and polished != description:
        store.update(job_id, {"description": polished})
        console.print("[green]Saved.[/green]")


def _polish(title: str, description: str) -> str:
    from careerhub.polish import polish_job_description

    config = _get_config()
    llm_client = _get_llm_client()
    if llm_client is None:
        console.print("[yellow]LLM not available; description left unchanged.[/yellow]")
        return description
    polished = polish_job_description(title, description, llm_client=llm_client, language=config.polish.language)
    if polished == description:
        console.print("[yellow]Polishing made no change.[/yellow]")
    return polished


@app.command()
def stats():
    """Show dashboard counters."""
    from careerhub.views import job_stats

    s = job_stats(_list_jobs(_get_store()))
    console.print(Panel(
        f"[bold]Total Jobs:[/bold] {s.total}\n"
        f"[bold]Open:[/bold] {s.open}\n"
        f"[bold]Closed / Archived:[/bold] {s.closed}",
        title="Dashboard",
    ))


@app.command()
def explorer(
    fmt: str = typer.Option("table", "--format", "-f", help="table or json"),
):
    """Inspect the raw storage slot."""
    from careerhub.export import export_jobs

    store = _get_store()
    job_list = _list_jobs(store)

    if fmt == "json":
        console.print_json(export_jobs(job_list))
        return
    if fmt != "table":
        console.print(f"[red]Unknown format: {escape(fmt)}[/red]. Valid: table, json")
        raise typer.Exit(1)

    table = Table(title=f"Slot '{store.key}' ({len(job_list)} records)")
    table.add_column("id", style="dim")
    table.add_column("title", style="bold")
    table.add_column("status")
    table.add_column("createdAt", justify="right")
    table.add_column("updatedAt", justify="right")
    for job in job_list:
        table.add_row(job.id, escape(job.title), _status_text(job.status), str(job.created_at), str(job.updated_at))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", "-h", help="Bind host (default: from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port (default: from config)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
):
    """Start the web API."""
    import uvicorn

    config = _get_config()
    bind_host = host or config.web.host
    bind_port = port or config.web.port

    console.print("[bold]Starting CareerHub web API[/bold]")
    console.print(f"  http://{bind_host}:{bind_port}")

    uvicorn.run(
        "careerhub.web.app:create_app",
        host=bind_host,
        port=bind_port,
        reload=reload or config.web.reload,
        factory=True,
    )


@app.command(name="config")
def config_cmd():
    """Show current configuration."""
    config = _get_config()
    console.print(Panel(str(config.model_dump_json(indent=2)), title="Configuration"))


if __name__ == "__main__":
    app()
