"""
CLI entry point for chemapi-server.

Usage: chemapi-server [PORT [THREADS]]
"""

import logging
from typing import Optional

import typer
import uvicorn
from rdkit import rdBase
from rich.console import Console
from rich.logging import RichHandler

from chemapi_server.app import create_app
from chemapi_server.config import get_server_settings


cli = typer.Typer(
    name="chemapi-server",
    help="RDKit cheminformatics API server",
    add_completion=False,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure colorful stderr logging using rich library.

    RDKit's own log output is forwarded to the ``rdkit`` Python logger, which
    is given the same handler as uvicorn and the root logger.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    console = Console(stderr=True, color_system="auto")

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )
    handler.setLevel(level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%Y-%m-%d %H:%M:%S]",
        handlers=[handler],
        force=True,
    )

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False

    # RDKit installs its own stderr handler on the "rdkit" logger; replace it
    rdBase.LogToPythonLogger()
    rdkit_logger = logging.getLogger("rdkit")
    rdkit_logger.handlers = [handler]
    rdkit_logger.propagate = False


@cli.command()
def run(
    port: Optional[int] = typer.Argument(
        None, min=0, max=65535, help="Port to bind to on all IPv4 interfaces [default: 9080]"
    ),
    threads: Optional[int] = typer.Argument(
        None, min=1, help="Number of worker threads [default: 2]"
    ),
) -> None:
    """Start the RDKit API server."""
    settings = get_server_settings()

    # Command line wins over environment
    overrides = {}
    if port is not None:
        overrides["port"] = port
    if threads is not None:
        overrides["threads"] = threads
    settings = settings.model_copy(update=overrides)

    setup_logging(settings.verbose, settings.debug)

    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info" if settings.verbose else "warning",
        log_config=None,
    )


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
