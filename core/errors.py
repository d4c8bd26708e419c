"""Exceptions raised by the bridge client.

Two families exist:
- FatalError: the invocation cannot continue (unreachable bridge, corrupt
  config file, response that matches no known shape)
- RecoverableError: the operator is told what went wrong and the invocation
  ends cleanly without touching the persisted config
"""


class HueCliError(Exception):
    """Base class for all Hue CLI errors."""


class FatalError(HueCliError):
    """Error the caller cannot recover from."""


class RecoverableError(HueCliError):
    """Error that is reported to the operator as plain text."""


class ConfigError(FatalError):
    """Raised when the configuration cannot be loaded or saved."""


class BridgeConnectionError(FatalError):
    """Raised when a request cannot be sent at all."""


class UnexpectedResponseError(FatalError):
    """Raised when a response body matches none of the known shapes."""


class DiscoveryError(RecoverableError):
    """Raised when the discovery service answers with a non-200 status."""


class PairingError(RecoverableError):
    """Raised when the bridge refuses to issue a username."""


class InvalidBrightnessError(RecoverableError):
    """Raised when a brightness argument is not an integer between 0 and 100."""


class InvalidLightNameError(RecoverableError):
    """Raised when no light on the bridge carries the requested name."""


class AliasExistsError(RecoverableError):
    """Raised when an alias is already mapped."""


class LightStateError(RecoverableError):
    """Raised when the bridge rejects a state update."""

    def __init__(self, message: str, error_type: int | None = None):
        super().__init__(message)
        self.error_type = error_type
