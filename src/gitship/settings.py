"""Settings read from the environment (GIT_SHIP_*)."""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = ".git-ship.conf"

FALSE_VALUES = {"", "0", "false", "no", "off"}


class Settings(BaseSettings):
    """Environment overrides for git-ship."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_SHIP_",
        env_ignore_empty=True,
        extra="ignore",
    )

    config: str = DEFAULT_CONFIG_FILE
    debug: bool = False
    plugin: str = "app"

    @field_validator("debug", mode="before")
    @classmethod
    def loose_bool(cls, value: Any) -> bool:
        """Any value other than empty, 0, false, no or off turns debug on."""
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_VALUES
        return bool(value)


def get_settings() -> Settings:
    """Read the settings from the current environment.

    Not cached: the environment is consulted on every call.
    """
    return Settings()
