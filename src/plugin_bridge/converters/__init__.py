"""
Target converters. Importing this package registers every target with
`plugin_bridge.core.converter.target_registry`.
"""

from plugin_bridge.converters import cursor  # noqa: F401
