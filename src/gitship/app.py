"""
git-ship core
Base class for shipping plugins: lazy project attributes and the
init/build/test/ship lifecycle.
"""

from typing import Any, Dict, Type
import logging
import os
import re
import subprocess

from . import git
from .attributes import attr, attribute, clear, is_set
from .config import config_file, load_config
from .errors import (
    MissingFieldError,
    NotSupportedError,
    ShipError,
    SubprocessError,
)

logger = logging.getLogger(__name__)

LICENSE_NAME = "artistic_2"
LICENSE_URL = "http://www.opensource.org/licenses/artistic-license-2.0"


class App:
    """
    Base class for git-ship plugins.

    A plugin subclasses App, declares extra attributes with ``has`` or
    ``@attribute`` and overrides the lifecycle steps it supports:

        >>> class Perl(App):
        ...     def build(self):
        ...         return self.system("make", "dist")
        ...     def ship(self):
        ...         return self.system("cpan-upload", self.dist_file())
        >>> Perl.has("dist_file", lambda self: f"{self.project_name()}.tar.gz")
    """

    name = "app"
    plugins: Dict[str, Type["App"]] = {}

    has = classmethod(attr)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "name" not in vars(cls):
            cls.name = cls.__name__.lower()
        existing = App.plugins.get(cls.name)
        if existing is not None and existing is not cls:
            logger.warning(
                f"Plugin {cls.name} from {existing.__module__}.{existing.__qualname__} "
                f"replaced by {cls.__module__}.{cls.__qualname__}"
            )
        App.plugins[cls.name] = cls
        logger.debug(f"Registered plugin {cls.name}: {cls.__module__}.{cls.__qualname__}")

    def __init__(self, **attributes: Any):
        for name, value in attributes.items():
            accessor = getattr(type(self), name, None)
            if not hasattr(accessor, "default"):
                raise TypeError(f"{type(self).__name__} has no attribute {name}")
            getattr(self, name)(value)

    # Attributes

    @attribute
    def config(self) -> Dict[str, str]:
        """Configuration read from ``.git-ship.conf`` (or GIT_SHIP_CONFIG)."""
        return load_config(config_file())

    @attribute
    def project_name(self) -> str:
        """Name of the project, from the ``project_name`` config key."""
        name = self.config().get("project_name")
        if name:
            return name
        self.abort("project_name is not defined in config file.", error=MissingFieldError)

    @attribute
    def repository(self) -> str:
        """URL of the project repository, from config or the git remotes."""
        repository = self.config().get("repository")
        if repository:
            return repository
        return git.repository_url()

    def is_set(self, name: str) -> bool:
        """True if attribute ``name`` already holds a value."""
        return is_set(self, name)

    def clear(self, name: str) -> "App":
        """Forget attribute ``name`` so it is rebuilt on next access."""
        return clear(self, name)

    # Utilities

    def abort(self, message: str, *args: Any, error: Type[ShipError] = ShipError):
        """Stop the run by raising ``error``; ``args`` are %-formatted into ``message``."""
        if args:
            message = message % args
        raise error(message)

    def author(self, format: str = "%an") -> str:
        """Latest author from the git log, e.g. ``self.author("%an, <%ae>")``."""
        return git.author(format)

    def system(self, program: str, *args: str) -> "App":
        """Run a command, aborting when it cannot start or exits non-zero."""
        cmd = [program, *args]
        command_line = " ".join(cmd)
        logger.info(f"Running {command_line}")

        try:
            exit_code = subprocess.run(cmd, check=False).returncode
        except OSError as e:
            raise SubprocessError(f"'{command_line}' failed: {e}", command=cmd) from e

        if exit_code:
            raise SubprocessError(
                f"'{command_line}' failed: {exit_code}",
                command=cmd,
                returncode=exit_code,
            )
        return self

    # Lifecycle

    def init(self) -> "App":
        """
        Populate ``config`` with project defaults.

        Keys that already have a value are kept. Defaults:

        - bugtracker: repository URL without ".git", with "/issues" appended
        - homepage: repository URL without ".git"
        - license_name: artistic_2
        - license_url: the Artistic License 2.0 URL
        """
        if self.is_set("config") or os.path.exists(config_file()):
            config = dict(self.config())
        else:
            config = {}

        self.config(config)

        if not config.get("bugtracker"):
            bugtracker = "/".join([self._repository_base(), "issues"])
            config["bugtracker"] = re.sub(r"(\w)//", r"\1/", bugtracker, count=1)
        if not config.get("homepage"):
            config["homepage"] = self._repository_base()
        if not config.get("license_name"):
            config["license_name"] = LICENSE_NAME
        if not config.get("license_url"):
            config["license_url"] = LICENSE_URL

        logger.info(f"Initialized {type(self).__name__} config with {len(config)} keys")
        return self

    def build(self):
        """Build the project. Must be overridden by plugins."""
        self.abort("build() is not available for %s", type(self).__name__, error=NotSupportedError)

    def test(self):
        """Test the project. Plugins without a test step may leave this alone."""
        self.abort("test() is not available for %s", type(self).__name__, error=NotSupportedError)

    def ship(self):
        """Ship the project to its repository. Must be overridden by plugins."""
        self.abort("ship() is not available for %s", type(self).__name__, error=NotSupportedError)

    def _repository_base(self) -> str:
        return re.sub(r"\.git$", "", self.repository())


App.plugins[App.name] = App
