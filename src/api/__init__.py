"""
HTTP API package for the task broker
"""

from .app import create_app
from .settings import Settings, get_settings

__all__ = ["create_app", "Settings", "get_settings"]
