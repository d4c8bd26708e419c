"""
Setup and help commands for Hue CLI.

Contains the Click group class that suggests commands for typos, the help
quick reference, and the discover, test and login commands.
"""

from dataclasses import dataclass

import click
from core.auth import discover_bridge, login
from core.controller import HueController
from models.utils import get_state, report_errors, similarity_score


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


COMMAND_SECTIONS = [
    CommandSection(
        name="BRIDGE SETUP",
        commands=[
            ("discover", "Find the bridge on the network (resets username and aliases)"),
            ("login", "Pair with the bridge after pressing its link button"),
            ("test", "Test the connection to the bridge"),
        ]
    ),
    CommandSection(
        name="LIGHTS",
        commands=[
            ("list", "List all lights with their on/off state"),
            ("set on <name>", "Turn a light on"),
            ("set off <name>", "Turn a light off"),
            ("set bri <name> <0-100>", "Set the brightness of a light"),
            ("set alias <name> <alias>", "Give a light a shorter name"),
        ]
    ),
]


class SuggestingGroup(click.Group):
    """Group that suggests similar commands when a name is mistyped."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"Error: No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg)
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]


@click.command(name='help')
def help_command():
    """Display a quick reference of all commands."""
    click.echo()
    click.secho("Hue CLI - Quick Reference", fg='cyan', bold=True)

    for section in COMMAND_SECTIONS:
        click.echo()
        click.secho(section.name, fg='yellow', bold=True)
        width = max(len(cmd) for cmd, _ in section.commands)
        for cmd, description in section.commands:
            click.echo(f"  {click.style(cmd.ljust(width), fg='green')}  {description}")

    click.echo()


@click.command(name='discover')
def discover_command():
    """Find the Hue bridge and save its address.

    Any saved username and aliases are discarded, since the discovered
    bridge may be a different device.
    """
    state = get_state()
    with report_errors():
        state.config = discover_bridge(state.config_path)


@click.command(name='test')
def test_command():
    """Test the connection to the Hue bridge."""
    state = get_state()
    with report_errors():
        HueController(state.config).test_connection()


@click.command(name='login')
def login_command():
    """Pair with the bridge to obtain a username.

    \b
    Press the link button on the bridge, then confirm the prompt.
    """
    state = get_state()
    with report_errors():
        state.config = login(state.config, state.config_path)
