"""
Config Module

YAML graph definition loading and validation.
"""

from .loader import ConfigLoader, GraphConfig, ActionConfig, build_graph

__all__ = [
    "ConfigLoader",
    "GraphConfig",
    "ActionConfig",
    "build_graph",
]
