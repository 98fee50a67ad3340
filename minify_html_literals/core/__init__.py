"""Core configuration and factory components."""

from minify_html_literals.core.config import Settings, get_settings
from minify_html_literals.core.factory import ComponentFactory, ResolvedPipeline, Toggle, get_factory
from minify_html_literals.core.options import MinifyOptions

__all__ = [
    "ComponentFactory",
    "MinifyOptions",
    "ResolvedPipeline",
    "Settings",
    "Toggle",
    "get_factory",
    "get_settings",
]
