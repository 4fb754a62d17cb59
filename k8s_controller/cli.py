import typer
import logging
import sys

from k8s_controller import __version__
from k8s_controller.config import Config
from k8s_controller.logging import parse_level, setup_logger
from k8s_controller.commands import list as list_cmd
from k8s_controller.commands.connection import connection
from k8s_controller.commands.serve import serve

app = typer.Typer(help="Inspect Kubernetes deployments and API connectivity.")

app.add_typer(list_cmd.app, name="list")
app.command("connection")(connection)
app.command("serve")(serve)


@app.command("version")
def version():
    """Print the version number."""
    typer.echo(f"k8s-controller version {__version__}")


# Global options callback
@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(Config.LOG_LEVEL.lower(), "--log-level",
                                  help="Log level (debug, info, warn, error, fatal)"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """k8s-controller - Kubernetes inspection CLI."""
    if ctx.invoked_subcommand == "version":
        return
    level = logging.DEBUG if debug else parse_level(log_level)
    logger = setup_logger("k8s_controller", level)
    logger.debug("Logger initialized (level=%s)", logging.getLevelName(level))


if __name__ == "__main__":
    try:
        app()
    except Exception as e:
        logging.getLogger("k8s_controller").error(f"Error: {e}")
        sys.exit(1)
