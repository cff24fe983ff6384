"""Puppy Bowl Roster - Main package.

This package manages a roster of players held by a remote REST API and
renders it as a static HTML page.

Modules:
    models - Data models (dataclasses)
    api - Roster API clients
    render - HTML views, render targets and the page shell
    form - New-player form controller
    app - Workflows tying API calls to re-renders
    config - Configuration
    cli - Command-line interface
"""

from .config import Config, APIConfig
from .app import RosterApp

__all__ = [
    'Config',
    'APIConfig',
    'RosterApp',
]

__version__ = '1.0.0'
