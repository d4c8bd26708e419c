"""Light aliases: short user-chosen names for bridge light names."""

from pathlib import Path

from core.config import save_config
from core.controller import HueController
from core.errors import AliasExistsError, InvalidLightNameError
from models.types import Config


def resolve_alias(name: str, config: Config) -> str:
    """Return the light name an alias points to, or the name itself."""
    return config.aliases.get(name, name)


def set_alias(name: str, alias: str, config: Config,
              controller: HueController | None = None,
              path: str | Path | None = None) -> Config:
    """Map ``alias`` to the light called ``name`` and save it.

    Existing aliases are never overwritten, and the light must be present in
    the bridge inventory.

    Args:
        name: Light name as reported by the bridge
        alias: New alias
        config: Current configuration
        controller: Controller used for the inventory lookup
        path: Optional config file location

    Returns:
        The saved Config

    Raises:
        AliasExistsError: If the alias is already mapped
        InvalidLightNameError: If no light has that name
    """
    if alias in config.aliases:
        raise AliasExistsError(f"Alias {alias} has already been set")

    controller = controller or HueController(config)
    if not any(light.name == name for light in controller.get_all_lights()):
        raise InvalidLightNameError(f"Invalid light name: {name}")

    aliases = dict(config.aliases)
    aliases[alias] = name

    new_config = Config(url=config.url, username=config.username, aliases=aliases)
    save_config(new_config, path)
    return new_config
