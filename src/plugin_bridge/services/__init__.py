"""
Services — business logic kept out of the CLI.
"""

from plugin_bridge.services.convert_service import run_convert

__all__ = ["run_convert"]
