"""dwrgen CLI - TypeScript contracts for DWR remoting backends."""

import typer

app = typer.Typer(
    name="dwrgen",
    help="Generate TypeScript entities and DWR client stubs from a backend metadata manifest",
    no_args_is_help=True,
)


@app.callback()
def main(ctx: typer.Context) -> None:
    """dwrgen - TypeScript contracts for DWR remoting backends."""
    from .logging import log_from_cli
    try:
        log_from_cli()
    except OSError:
        # Don't let logging failures break the CLI
        pass


# Import and register command modules
from .commands import generate as generate_cmd
from .commands import inspect as inspect_cmd
from .commands import config_cmd
from .commands import logs as logs_cmd

app.command(name="generate")(generate_cmd.generate)
app.command(name="inspect")(inspect_cmd.inspect)

# Register config commands as a subcommand group
app.add_typer(config_cmd.app, name="config")

# Register logs commands as a subcommand group
app.add_typer(logs_cmd.app, name="logs")


if __name__ == "__main__":
    app()
