import json
import logging
from pathlib import Path
from typing import Any

import typer

from ghdispatch import api
from ghdispatch.exceptions import GitHubError
from ghdispatch.git import resolve_github_project
from ghdispatch.logging import configure_logging
from ghdispatch.session import DispatchTarget
from ghdispatch.types.repos import RepositoryRef

app = typer.Typer(
    help="Fire GitHub repository_dispatch events from a local checkout.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log HTTP and credential activity to stderr."
    ),
) -> None:
    if verbose:
        configure_logging(level=logging.DEBUG)


def _parse_repo(value: str) -> RepositoryRef:
    owner, _, repo = value.partition("/")
    if not owner or not repo or "/" in repo:
        raise typer.BadParameter(f"Expected OWNER/REPO, got '{value}'")
    return RepositoryRef(owner=owner, repo=repo)


def _parse_payload(value: str | None) -> dict[str, Any] | None:
    if value is None:
        return None
    try:
        payload = json.loads(value)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise typer.BadParameter("Payload must be a JSON object")
    return payload


@app.command()
def dispatch(
    event_type: str = typer.Argument(..., help="Event type the workflows listen for"),
    path: Path = typer.Option(
        Path("."), "--path", "-p", help="Local checkout whose upstream is the target."
    ),
    repo: str | None = typer.Option(
        None, "--repo", "-r", help="Target OWNER/REPO directly instead of resolving --path."
    ),
    payload: str | None = typer.Option(
        None, "--payload", help="JSON object sent as client_payload."
    ),
) -> None:
    """
    Dispatch a repository_dispatch event.
    """
    target: DispatchTarget = _parse_repo(repo) if repo else path
    client_payload = _parse_payload(payload)

    try:
        result = api.dispatch_event(target, event_type, client_payload=client_payload)
    except GitHubError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result.message)


@app.command()
def resolve(
    directory: Path = typer.Argument(Path("."), help="Path inside a git checkout"),
) -> None:
    """
    Print the GitHub OWNER/REPO a checkout's current branch tracks.
    """
    try:
        description = resolve_github_project(directory)
    except GitHubError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(description.repo_id)


@app.command()
def whoami() -> None:
    """
    Authenticate and print the GitHub login the token belongs to.
    """
    try:
        client = api.get_github_api()
        user = client.users.get_authenticated()
    except GitHubError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(user.login)


if __name__ == "__main__":
    app()
