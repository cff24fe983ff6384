"""Player commands - direct calls to the roster API."""

import click
import functools

from ..api.client import PlayerApiError


def api_errors(func):
    """Turn PlayerApiError into a red message and exit status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PlayerApiError as e:
            click.echo(click.style(f"Error ({e.operation}): {e}", fg='red'), err=True)
            raise SystemExit(1)
    return wrapper


@click.command('list')
@click.pass_context
@api_errors
def list_players(ctx):
    """List all players on the roster."""
    players = ctx.obj['client'].list_players()

    if not players:
        click.echo("No players available.")
        return

    click.echo(f"{'ID':>8}  {'Name':<20}  {'Breed':<30}  Team")
    click.echo("-" * 72)
    for player in players:
        click.echo(f"{player.id!s:>8}  {player.name:<20}  {player.breed or '':<30}  {player.team_label}")
    click.echo(f"\n{len(players)} players")


@click.command()
@click.argument('player_id', type=int)
@click.pass_context
@api_errors
def show(ctx, player_id):
    """Show one player's details."""
    player = ctx.obj['client'].get_player(player_id)

    click.echo(player.name)
    click.echo(f"  ID:    {player.id}")
    click.echo(f"  Breed: {player.breed}")
    click.echo(f"  Image: {player.image_url}")
    click.echo(f"  Team:  {player.team_label}")
