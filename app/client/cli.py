import logging
import os
from typing import Any, Dict

import click

from app.client.api import ApiError, JobBoardClient, UnauthorizedError
from app.client.session import KEYRING_APP_ID, TokenStore

DEFAULT_API_URL = "http://localhost:3000"


class ClickEchoHandler(logging.Handler):
    """Writes plain log lines through click so they land on the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    # Only the client's own logger; the root logger belongs to whoever embeds us
    logger = logging.getLogger("app.client")
    logger.propagate = False
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.CRITICAL)


def build_client() -> JobBoardClient:
    base_url = os.getenv("JOBBOARD_API_URL", DEFAULT_API_URL)
    token_store = TokenStore(os.getenv("JOBBOARD_KEYRING_SERVICE", KEYRING_APP_ID))
    return JobBoardClient(base_url, token_store)


def render_job_card(job: Dict[str, Any]) -> str:
    return (
        f"[{job['id']}] {job['title']} - {job['company']}\n"
        f"    {job['location']} | {job['salary']} | {job['jobType']} | Posted: {job['postedDate']}"
    )


def render_job_details(job: Dict[str, Any]) -> str:
    lines = [
        job["title"],
        job["company"],
        f"{job['location']} | {job['salary']} | {job['jobType']}",
        f"Posted: {job['postedDate']}",
        "",
        job["description"],
        "",
        "Requirements:",
    ]
    lines.extend(f"  - {req}" for req in job["requirements"])
    return "\n".join(lines)


def render_page_info(pagination: Dict[str, Any]) -> str:
    # An empty result has totalPages == 0 but still reads as one page
    return f"Page {pagination['currentPage']} of {pagination['totalPages'] or 1}"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show client log messages")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Job Board demo client."""
    configure_logging(verbose)
    if ctx.obj is None:
        ctx.obj = build_client()


@cli.command()
@click.option("--email", prompt=True)
@click.option("--password", prompt=True, hide_input=True)
@click.pass_obj
def login(client: JobBoardClient, email: str, password: str) -> None:
    """
    Logs in and stores the token for later commands
    """
    try:
        client.login(email, password)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo("Login successful")


@cli.command()
@click.pass_obj
def logout(client: JobBoardClient) -> None:
    """
    Forgets the stored token
    """
    client.logout()
    click.echo("Logged out successfully")


@cli.command()
@click.option("--page", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--limit", default=10, show_default=True, type=click.IntRange(min=1))
@click.option("--search", default="", help="Match against job title or company")
@click.pass_obj
def jobs(client: JobBoardClient, page: int, limit: int, search: str) -> None:
    """
    Lists one page of jobs
    """
    client.state.limit = limit
    client.state.search(search)
    client.state.change_page(page - 1)
    try:
        data = client.fetch_jobs()
    except UnauthorizedError as e:
        raise click.ClickException(f"{e.message}. Run 'jobboard login'.")
    except ApiError as e:
        raise click.ClickException(f"Failed to load jobs: {e.message}")

    if not data["jobs"]:
        click.echo("No jobs found. Try adjusting your search criteria.")
    for job in data["jobs"]:
        click.echo(render_job_card(job))
    click.echo(render_page_info(data["pagination"]))


@cli.command()
@click.argument("job_id", type=int)
@click.pass_obj
def show(client: JobBoardClient, job_id: int) -> None:
    """
    Shows the full details of one job
    """
    try:
        job = client.fetch_job(job_id)
    except UnauthorizedError as e:
        raise click.ClickException(f"{e.message}. Run 'jobboard login'.")
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(render_job_details(job))


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=3000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """
    Runs the API server
    """
    import uvicorn
    uvicorn.run("app.main:app", host=host, port=port)


if __name__ == "__main__":
    cli()
