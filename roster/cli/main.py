"""
Puppy Bowl Roster CLI

Command-line interface for the roster API and the rendered roster page.

Usage:
    roster [OPTIONS] COMMAND [ARGS]...

Commands:
    list      List all players
    show      Show one player
    add       Add a player
    remove    Remove a player
    render    Render the roster page
    details   Render the detail page for one player
"""

import click
import logging
import sys
from dotenv import load_dotenv

from ..api.client import ProductionPlayerApiClient
from ..config import Config

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('--base-url', default=None, help='API base URL (default: ROSTER_API_URL or built-in)')
@click.option('--cohort', default=None, help='Cohort name (default: ROSTER_COHORT or built-in)')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, base_url, cohort, verbose, quiet):
    """Puppy Bowl Roster - Manage players and render the roster page."""
    # Configure logging based on verbosity
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    config = Config.from_env()
    if base_url:
        config.api.base_url = base_url
    if cohort:
        config.api.cohort = cohort

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    # Tests inject a client through obj
    ctx.obj.setdefault('client', ProductionPlayerApiClient(config.api))


# Import and register commands
from .players import list_players, show
from .page import render, details, add, remove

cli.add_command(list_players)
cli.add_command(show)
cli.add_command(add)
cli.add_command(remove)
cli.add_command(render)
cli.add_command(details)


if __name__ == '__main__':
    cli()
