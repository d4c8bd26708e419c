"""Core functionality for Hue control.

This package contains:
- config: Loading and saving the config file
- controller: HueController class for API interaction
- auth: Bridge discovery and link button pairing
- aliases: Alias resolution and creation
- state: On/off and brightness changes
- errors: Fatal and recoverable error types
"""
