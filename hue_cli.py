#!/usr/bin/env python3
"""
Hue CLI
Discover, pair with and control the lights of a Philips Hue bridge.
"""

import click

from core.config import load_config
from models.utils import CliState, report_errors

from commands.setup import SuggestingGroup, help_command, discover_command, test_command, login_command
from commands.inspection import list_lights_command
from commands.control import set_group


@click.group(
    cls=SuggestingGroup,
    context_settings={'help_option_names': ['-h', '--help']}
)
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              default=None, help='Config file (default: $HUE_CLI_CONFIG or ./config.json)')
@click.version_option(version='0.1.0', prog_name='Hue CLI')
@click.pass_context
def cli(ctx, config_path: str | None):
    """Control your hue lights from the cli!

Run 'discover' to find the bridge, then 'login' to pair with it.

Use 'help' for a quick reference of all commands."""
    with report_errors():
        ctx.obj = CliState(config=load_config(config_path), config_path=config_path)


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(discover_command)
cli.add_command(test_command)
cli.add_command(login_command)

# Register inspection commands
cli.add_command(list_lights_command)

# Register control commands
cli.add_command(set_group)


if __name__ == '__main__':
    cli()
