"""Data models and utility functions.

This package contains:
- types: Config, Light and discovery result types
- envelope: Success/error response envelopes
- utils: Shared CLI helpers
"""
