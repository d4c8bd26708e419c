"""
Control commands for changing light state and aliases.

Includes on, off, brightness and alias, all grouped under ``set``.
"""

import click
from commands.setup import SuggestingGroup
from core.aliases import set_alias
from core.state import Brightness, On, set_state, validate_brightness
from models.utils import get_state, report_errors


@click.group(name='set', cls=SuggestingGroup)
def set_group():
    """Set a light's state or alias."""


@set_group.command(name='on')
@click.argument('name')
def on_command(name: str):
    """Turn a light on.

    \b
    Examples:
      hue-cli set on "Lamp 1"
      hue-cli set on desk
    """
    state = get_state()
    with report_errors():
        click.echo(set_state(On(True), name, state.config))


@set_group.command(name='off')
@click.argument('name')
def off_command(name: str):
    """Turn a light off."""
    state = get_state()
    with report_errors():
        click.echo(set_state(On(False), name, state.config))


@set_group.command(name='bri')
@click.argument('name')
@click.argument('brightness')
def brightness_command(name: str, brightness: str):
    """Set the brightness of a light between 0 and 100.

    \b
    Examples:
      hue-cli set bri "Lamp 1" 50
    """
    state = get_state()
    with report_errors():
        value = validate_brightness(brightness)
        click.echo(set_state(Brightness(value), name, state.config))


@set_group.command(name='alias')
@click.argument('name')
@click.argument('alias')
def alias_command(name: str, alias: str):
    """Set an alias for a light so that it is easier to reference later.

    \b
    Examples:
      hue-cli set alias "Lamp 1" desk
    """
    state = get_state()
    with report_errors():
        state.config = set_alias(name, alias, state.config, path=state.config_path)
        click.echo(f"✓ {alias} now refers to {name}")
