"""Page commands - run the roster workflows and write the rendered page."""

import click

from ..app import RosterApp
from ..render.views import details_control_id, remove_control_id
from .players import api_errors


def _write_page(ctx, app: RosterApp, output):
    """Write the page to a file, or to stdout when output is '-'."""
    path = output or ctx.obj['config'].output_path
    html = app.page()

    if path == '-':
        click.echo(html, nl=False)
        return

    with open(path, 'w', encoding='utf-8') as f:
        f.write(html)
    click.echo(click.style(f"Wrote {app.view.value} view to {path}", fg='green'))


def _load(ctx) -> RosterApp:
    app = RosterApp(ctx.obj['client'])
    app.initialize()
    return app


def _require_control(app: RosterApp, control_id: str, player_id: int):
    """Exit with status 1 when the player has no mounted control."""
    if control_id not in app.bindings:
        click.echo(click.style(f"Player #{player_id} is not on the roster", fg='red'), err=True)
        raise SystemExit(1)


@click.command()
@click.option('-o', '--output', default=None, help="Output path ('-' for stdout, default: ROSTER_OUTPUT or index.html)")
@click.pass_context
@api_errors
def render(ctx, output):
    """Load the roster and render the full page."""
    app = _load(ctx)
    _write_page(ctx, app, output)


@click.command()
@click.argument('player_id', type=int)
@click.option('-o', '--output', default=None, help="Output path ('-' for stdout)")
@click.pass_context
@api_errors
def details(ctx, player_id, output):
    """Render the page with one player's detail card mounted."""
    app = _load(ctx)

    control_id = details_control_id(player_id)
    _require_control(app, control_id, player_id)

    app.dispatch(control_id)
    _write_page(ctx, app, output)


@click.command()
@click.option('--name', required=True, help='Player name')
@click.option('--breed', required=True, help='Player breed')
@click.option('--image-url', required=True, help='Image URL')
@click.option('-o', '--output', default=None, help="Output path ('-' for stdout)")
@click.pass_context
@api_errors
def add(ctx, name, breed, image_url, output):
    """Submit the new-player form, then write the refreshed roster page."""
    app = _load(ctx)
    app.dispatch('submit', {'name': name, 'breed': breed, 'imageBox': image_url})

    click.echo(click.style(f"Added {name} ({len(app.players)} players)", fg='green'), err=True)
    _write_page(ctx, app, output)


@click.command()
@click.argument('player_id', type=int)
@click.option('-o', '--output', default=None, help="Output path ('-' for stdout)")
@click.pass_context
@api_errors
def remove(ctx, player_id, output):
    """Remove a player, then write the refreshed roster page."""
    app = _load(ctx)

    control_id = remove_control_id(player_id)
    _require_control(app, control_id, player_id)

    app.dispatch(control_id)
    click.echo(click.style(f"Removed player #{player_id}", fg='green'), err=True)
    _write_page(ctx, app, output)
