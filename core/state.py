"""Light state changes: on/off and brightness.

Brightness is given as a percentage (0-100) and rescaled to the bridge's
native 0-255 range before it is sent.
"""

from dataclasses import dataclass
from typing import Union

from core.aliases import resolve_alias
from core.controller import HueController
from core.errors import InvalidBrightnessError, InvalidLightNameError, LightStateError
from models.envelope import ERROR_DEVICE_IS_OFF, first_error
from models.types import Config, Light

MAX_BRIGHTNESS = 100
BRIDGE_MAX_BRIGHTNESS = 255


@dataclass(frozen=True)
class On:
    value: bool


@dataclass(frozen=True)
class Brightness:
    value: int


LightState = Union[On, Brightness]


def validate_brightness(value: str) -> int:
    """Parse a brightness percentage from the command line.

    An optional leading '+' is allowed; whitespace is not.

    Raises:
        InvalidBrightnessError: If the value is not an integer between 0 and 100
    """
    digits = value[1:] if value.startswith('+') else value
    if not digits.isdigit() or not digits.isascii():
        raise InvalidBrightnessError(f"Unable to set brightness: invalid digit in '{value}'")

    brightness = int(digits)
    if brightness > MAX_BRIGHTNESS:
        raise InvalidBrightnessError("Unable to set brightness: Brightness value not between 0 and 100")
    return brightness


def state_body(state: LightState) -> dict:
    """Build the JSON body for a state update."""
    if isinstance(state, On):
        return {'on': state.value}
    # floor(v / 100 * 255) without float rounding
    return {'bri': state.value * BRIDGE_MAX_BRIGHTNESS // MAX_BRIGHTNESS}


def state_message(state: LightState) -> str:
    if isinstance(state, On):
        return "Turned on" if state.value else "Turned off"
    return f"Set brightness to {state.value} for"


def light_address(lights: list[Light], name: str) -> int | None:
    """Return the 1-based bridge address of the first light called ``name``.

    The address is the light's position in the inventory as fetched, not the
    bridge's own light ID.
    """
    for index, light in enumerate(lights):
        if light.name == name:
            return index + 1
    return None


def set_state(state: LightState, name: str, config: Config,
              controller: HueController | None = None) -> str:
    """Apply a state change to a light referenced by name or alias.

    Args:
        state: On(...) or Brightness(...)
        name: Light name or alias
        config: Current configuration
        controller: Controller used for the lookup and the update

    Returns:
        Confirmation message for the operator

    Raises:
        InvalidLightNameError: If no light has the resolved name
        LightStateError: If the bridge rejects the update
    """
    body = state_body(state)
    name = resolve_alias(name, config)

    controller = controller or HueController(config)
    address = light_address(controller.get_all_lights(), name)
    if address is None:
        raise InvalidLightNameError(f"Invalid light name {name}")

    error = first_error(controller.set_light_state(address, body))
    if error is None:
        return f"{state_message(state)} {name} successfully"

    if error.type == ERROR_DEVICE_IS_OFF:
        raise LightStateError("Cannot set value on a light that is not turned on", error.type)
    raise LightStateError(
        f"Something went wrong when setting a state on the light: {error.description}",
        error.type,
    )
