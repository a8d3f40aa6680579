"""
git-ship - ship your project

Base class and helpers for git-ship plugins: lazily computed project
attributes and an init/build/test/ship lifecycle.

Example:
    >>> from gitship import App, attribute
    >>>
    >>> class Python(App):
    ...     @attribute
    ...     def dist_dir(self):
    ...         return "dist"
    ...     def build(self):
    ...         return self.system("python", "-m", "build", "--outdir", self.dist_dir())
    ...     def ship(self):
    ...         return self.system("twine", "upload", f"{self.dist_dir()}/*")
    >>>
    >>> Python().init().build().ship()
"""

from .app import App, LICENSE_NAME, LICENSE_URL
from .attributes import attr, attribute, clear, is_set
from .config import append_config, config_file, load_config, parse_config, write_config
from .errors import (
    ShipError,
    ConfigLoadError,
    MissingFieldError,
    RepositoryNotFoundError,
    SubprocessError,
    NotSupportedError,
    PluginNotFoundError,
)
from .loader import available_plugins, load_plugin

__version__ = "0.1.0"
__author__ = "git-ship"
__all__ = [
    # Core classes
    "App",
    "LICENSE_NAME",
    "LICENSE_URL",
    # Attributes
    "attr",
    "attribute",
    "clear",
    "is_set",
    # Config
    "append_config",
    "config_file",
    "load_config",
    "parse_config",
    "write_config",
    # Errors
    "ShipError",
    "ConfigLoadError",
    "MissingFieldError",
    "RepositoryNotFoundError",
    "SubprocessError",
    "NotSupportedError",
    "PluginNotFoundError",
    # Plugins
    "available_plugins",
    "load_plugin",
]
