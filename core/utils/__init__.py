"""Utility helpers shared across core packages.

Kept limited to environment helpers so that ``core.config`` can import them
without pulling feature modules in during start-up.
"""

from .env import get_env, get_env_list, get_node_env, is_production

__all__ = [
    "get_env",
    "get_env_list",
    "get_node_env",
    "is_production",
]
