"""Favorites commands for the pace CLI."""

import json

import typer

from pace_cli import display, session

app = typer.Typer(help="Pinned conversions")


def _show(json_output: bool) -> None:
    favorites = session.get_favorites()

    if json_output:
        print(json.dumps([f.model_dump(mode="json") for f in favorites.favorites], indent=2))
    else:
        display.display_favorites(favorites.favorites)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show favorites when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        _show(json_output=False)


@app.command(name="list")
def list_favorites(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """List pinned conversions, newest first."""
    _show(json_output)


@app.command()
def remove(
    favorite_id: str = typer.Argument(..., help="Favorite ID, or its first characters"),
) -> None:
    """Unpin a conversion."""
    store = session.get_favorites()
    matches = [f for f in store.favorites if str(f.id).startswith(favorite_id.lower())]

    if not matches:
        display.display_error(f"No favorite with ID '{favorite_id}'")
        raise typer.Exit(1)
    if len(matches) > 1:
        display.display_error(f"ID '{favorite_id}' is ambiguous ({len(matches)} matches)")
        raise typer.Exit(1)

    favorite = matches[0]
    store.remove(favorite.id)
    display.display_success(f"Removed {favorite.input} {favorite.input_suffix}")


@app.command()
def clear() -> None:
    """Unpin every conversion."""
    session.get_favorites().clear()
    display.display_success("Favorites cleared")
