"""Inspection commands for viewing bridge state."""

import click
from core.controller import HueController
from models.utils import get_state, report_errors


@click.command(name='list')
def list_lights_command():
    """List all lights and whether they are on."""
    state = get_state()
    with report_errors():
        HueController(state.config).list_lights()
