"""CLI command modules.

This package contains:
- setup: Setup and help commands (help, discover, test, login)
- inspection: Inspection commands (list)
- control: Direct control commands (set on/off/bri/alias)
"""
