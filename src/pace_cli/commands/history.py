"""History commands for the pace CLI."""

import json

import typer

from pace_cli import display, session

app = typer.Typer(help="Recent conversions")


def _show(json_output: bool) -> None:
    history = session.get_history()

    if json_output:
        print(json.dumps([r.model_dump(mode="json") for r in history.records], indent=2))
    else:
        display.display_history(history.records)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show recent conversions when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        _show(json_output=False)


@app.command(name="list")
def list_history(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """List recent conversions, newest first."""
    _show(json_output)


@app.command()
def clear() -> None:
    """Forget every recorded conversion."""
    session.get_history().clear()
    display.display_success("History cleared")
