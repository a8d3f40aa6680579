"""
Plugin lookup.

A plugin is found, in order, among the classes already registered on
App, as a ``module:Class`` path, or in the ``gitship.plugins`` entry
point group.
"""

from importlib.metadata import entry_points
from typing import List, Type
import importlib
import logging

from .app import App
from .errors import PluginNotFoundError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "gitship.plugins"


def _check(name: str, obj: object) -> Type[App]:
    if not (isinstance(obj, type) and issubclass(obj, App)):
        raise PluginNotFoundError(f"{name} is not a git-ship plugin")
    return obj


def load_plugin(name: str) -> Type[App]:
    """Resolve ``name`` to a plugin class."""
    if name in App.plugins:
        return App.plugins[name]

    if ":" in name:
        module_name, _, class_name = name.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise PluginNotFoundError(f"Could not import {module_name}: {e}") from e
        if not hasattr(module, class_name):
            raise PluginNotFoundError(f"No {class_name} in {module_name}")
        return _check(name, getattr(module, class_name))

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        if ep.name == name:
            logger.debug(f"Loading plugin {name} from {ep.value}")
            try:
                plugin = ep.load()
            except Exception as e:
                raise PluginNotFoundError(f"Could not load {name}: {e}") from e
            return _check(name, plugin)

    raise PluginNotFoundError(f"Unknown plugin: {name}")


def available_plugins() -> List[str]:
    """Names of registered and installed plugins."""
    names = set(App.plugins)
    names.update(ep.name for ep in entry_points(group=ENTRY_POINT_GROUP))
    return sorted(names)
