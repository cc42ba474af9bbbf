"""CLIエントリポイント。"""

from __future__ import annotations

import logging
import sys
from typing import Any

from curlall.config import DEFAULT_TIMEOUT, NAME, FetchConfig
from curlall.errors import CurlallError
from curlall.output import write_record


def _require_typer() -> Any:
    try:
        import typer
    except ImportError as exc:
        raise RuntimeError(
            "The CLI requires typer. Run: pip install 'curlall[cli]'"
        ) from exc
    return typer


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )


def build_app(http_client: Any = None) -> Any:
    """CLIアプリを構築する。

    Args:
        http_client: 外部httpx.Client。未指定時は内部で生成する。

    Returns:
        typerアプリ。
    """

    typer = _require_typer()
    from curlall.client import CurlallClient

    app = typer.Typer(
        name=NAME,
        help="Simple curl-like tool to automatically page through APIs.",
        add_completion=False,
        no_args_is_help=True,
    )

    @app.command()
    def main(
        url: str = typer.Argument(..., metavar="URL"),
        user_password: str | None = typer.Option(
            None, "-u", "--user", metavar="user:password", help="Basic auth."
        ),
        limit: int | None = typer.Option(
            None,
            "-n",
            "--limit",
            metavar="count",
            help="How many values to fetch. If not specified, all pages are fetched.",
        ),
        wait: float | None = typer.Option(
            None, "--wait", metavar="seconds", help="How many seconds to wait between requests."
        ),
        header: list[str] | None = typer.Option(
            None,
            "-H",
            "--header",
            metavar="Name: Value",
            help='Add a header. Repeat for more: -H "Accept: application/json" -H "Cache-Control: no-cache"',
        ),
        timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", help="HTTP timeout in seconds."),
        verbose: bool = typer.Option(False, "-v", "--verbose", help="Log requests to stderr."),
    ) -> None:
        """Fetch every page of URL and print one JSON value per line."""

        _configure_logging(verbose)
        config = FetchConfig(
            user_password=user_password,
            limit=limit,
            wait=wait,
            headers=tuple(header or ()),
        )
        try:
            with CurlallClient(config, timeout=timeout, http_client=http_client) as client:
                for record in client.records(url):
                    write_record(record, sys.stdout)
        except CurlallError as exc:
            typer.echo(f"{NAME}: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    return app


def app_entry() -> None:
    """CLIアプリを起動する。"""

    build_app()()


if __name__ == "__main__":
    app_entry()
