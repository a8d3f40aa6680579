"""
Lazy attributes.

An attribute is an accessor method installed on a class:

    >>> class Project(App):
    ...     @attribute
    ...     def main_module(self):
    ...         return self.project_name().replace("-", "/")
    >>>
    >>> project.main_module()          # computed once, then cached
    >>> project.main_module("lib/x")   # overwrite, returns project

Values live on the instance; the accessor lives on the class.
"""

from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)

STORE = "_attributes"

Default = Callable[[Any], Any]


def _store(instance: Any) -> dict:
    return vars(instance).setdefault(STORE, {})


def make_accessor(name: str, default: Default) -> Callable:
    """Build the get/set accessor for ``name`` backed by ``default``."""

    def accessor(self, *value):
        if len(value) > 1:
            raise TypeError(
                f"{name}() takes at most 1 argument ({len(value)} given)"
            )

        store = _store(self)
        if value:
            store[name] = value[0]
            return self

        if name not in store:
            logger.debug(f"Building attribute {type(self).__name__}.{name}")
            store[name] = default(self)
        return store[name]

    accessor.__name__ = name
    accessor.__qualname__ = name
    accessor.__doc__ = default.__doc__
    accessor.default = default
    return accessor


def attr(cls: type, name: str, default: Default) -> type:
    """Install a lazy attribute called ``name`` on ``cls``."""
    if not callable(default):
        raise TypeError(f"Default for attribute {name} must be callable")

    accessor = make_accessor(name, default)
    accessor.__qualname__ = f"{cls.__qualname__}.{name}"
    setattr(cls, name, accessor)
    return cls


class Declaration:
    """Placeholder left in a class body by :func:`attribute`.

    Replaced by the real accessor once the owning class is created.
    """

    def __init__(self, default: Default):
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        attr(owner, name, self.default)


def attribute(default: Default) -> Declaration:
    """Decorator form of :func:`attr` for use inside a class body."""
    return Declaration(default)


def is_set(instance: Any, name: str) -> bool:
    """Return True if ``name`` holds a value on ``instance``."""
    return name in _store(instance)


def clear(instance: Any, name: str) -> Any:
    """Drop the cached value so the next read calls the default again."""
    _store(instance).pop(name, None)
    return instance
