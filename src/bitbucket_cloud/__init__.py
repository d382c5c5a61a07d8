import json
from typing import Any

import click
from dotenv import load_dotenv

__version__ = "0.3.0"

from .bitbucket import BitbucketConfig, BitbucketFetcher, CommitsParameters
from .exceptions import BitbucketCloudError
from .logging_config import LoggingContextManager, log_operation, setup_logger

logger = setup_logger()


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Also write logs to the LOG_DIR directory",
)
@click.pass_context
def main(
    ctx: click.Context, verbose: int, env_file: str | None, log_to_file: bool
) -> None:
    """bitbucket-cloud - browse Bitbucket Cloud repositories from the shell.

    Credentials are read from BITBUCKET_* environment variables, or from a
    .env file.
    """
    logging_level = "WARNING"
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"
    setup_logger(level=logging_level, log_to_file=log_to_file)

    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv()

    def make_fetcher() -> BitbucketFetcher:
        try:
            return BitbucketFetcher(config=BitbucketConfig.from_env())
        except ValueError as e:
            raise click.ClickException(str(e)) from e

    ctx.obj = make_fetcher


def _run(
    ctx: click.Context, operation: str, **context: Any
) -> tuple[BitbucketFetcher, LoggingContextManager]:
    """Build the fetcher and hand it to the command under a logging context."""
    fetcher: BitbucketFetcher = ctx.obj()
    return fetcher, log_operation(logger, operation, **context)


@main.command()
@click.argument("workspace")
@click.argument("repo_slug")
@click.pass_context
def repository(ctx: click.Context, workspace: str, repo_slug: str) -> None:
    """Show a repository."""
    fetcher, operation = _run(ctx, "get_repository", repository=repo_slug)
    try:
        with operation, fetcher:
            repo = fetcher.get_repository(workspace, repo_slug)
    except BitbucketCloudError as e:
        raise click.ClickException(str(e)) from e
    _echo_json(repo.to_simplified_dict())


@main.command()
@click.argument("workspace")
@click.argument("repo_slug")
@click.option("--branch", help="Only commits reachable from this branch")
@click.option("--include", "includes", multiple=True, help="Include a branch")
@click.option("--exclude", "excludes", multiple=True, help="Exclude a branch")
@click.option("--path", help="Only commits touching this path")
@click.option("--max", "max_items", type=click.IntRange(min=0), help="Max commits")
@click.pass_context
def commits(
    ctx: click.Context,
    workspace: str,
    repo_slug: str,
    branch: str | None,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    path: str | None,
    max_items: int | None,
) -> None:
    """List commits, newest first."""
    parameters = CommitsParameters(
        includes=list(includes), excludes=list(excludes), path=path
    )
    fetcher, operation = _run(ctx, "list_commits", repository=repo_slug)
    try:
        with operation, fetcher:
            result = fetcher.list_commits(
                workspace,
                repo_slug,
                branch=branch,
                parameters=parameters,
                max_items=max_items,
            )
    except BitbucketCloudError as e:
        raise click.ClickException(str(e)) from e
    _echo_json([commit.to_simplified_dict() for commit in result])


@main.command("pull-request")
@click.argument("workspace")
@click.argument("repo_slug")
@click.argument("pr_id", type=int)
@click.option("--comments/--no-comments", default=False, help="Include comments")
@click.pass_context
def pull_request(
    ctx: click.Context, workspace: str, repo_slug: str, pr_id: int, comments: bool
) -> None:
    """Show a pull request."""
    fetcher, operation = _run(ctx, "get_pull_request", pull_request=pr_id)
    try:
        with operation, fetcher:
            pr = fetcher.get_pull_request(workspace, repo_slug, pr_id)
            pr_comments = (
                fetcher.list_pull_request_comments(workspace, repo_slug, pr_id)
                if pr is not None and comments
                else []
            )
    except BitbucketCloudError as e:
        raise click.ClickException(str(e)) from e

    if pr is None:
        raise click.ClickException(
            f"Pull request {pr_id} not found in {workspace}/{repo_slug}"
        )
    result = pr.to_simplified_dict()
    if comments:
        result["comments"] = [c.to_simplified_dict() for c in pr_comments]
    _echo_json(result)


__all__ = [
    "BitbucketConfig",
    "BitbucketFetcher",
    "CommitsParameters",
    "__version__",
    "main",
]