"""
Client configuration.

Settings are read from ``MC_``-prefixed environment variables and an
optional ``.env`` file.
"""

from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from mc_client.aliases import DEFAULT_ALIASES, AliasTable, validate_alias_name
from mc_client.errors import AliasResolutionError, ConfigError, ConfigLoadError


class Settings(BaseSettings):
    """mc client settings."""

    model_config = SettingsConfigDict(
        env_prefix="MC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Host used when a command is given no URL argument
    default_host: str = ""

    # Alias name -> endpoint URL (MC_ALIASES is JSON)
    aliases: dict[str, str] = dict(DEFAULT_ALIASES)

    # Environment ("development" renders colored console logs, anything else JSON)
    environment: str = "development"

    # Logging
    log_level: str = "INFO"

    @field_validator("aliases")
    @classmethod
    def check_alias_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject malformed or reserved alias names."""
        for name in v:
            try:
                validate_alias_name(name)
            except AliasResolutionError as e:
                raise ValueError(str(e)) from e
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Convert log level to uppercase."""
        return v.upper()

    def get_default_host(self) -> str:
        """
        Get the host used for an empty command-line argument.

        Returns
        -------
        str
            Configured default host.

        Raises
        ------
        ConfigError
            If no default host is configured.
        """
        if not self.default_host:
            raise ConfigError(
                "no default host configured (set MC_DEFAULT_HOST)", op="config", url=""
            )
        return self.default_host

    def alias_table(self) -> AliasTable:
        """Build the alias lookup table from the configured aliases."""
        return AliasTable(self.aliases)


def load_settings(**overrides: Any) -> Settings:
    """
    Load settings from the environment, applying explicit overrides.

    Parameters
    ----------
    **overrides : Any
        Field values taking precedence over the environment.

    Returns
    -------
    Settings
        Validated settings.

    Raises
    ------
    ConfigLoadError
        If the configuration fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigLoadError(
            f"configuration validation failed with {len(errors)} error(s)", errors=errors
        ) from e
    except SettingsError as e:
        raise ConfigLoadError(f"configuration could not be loaded: {e}") from e
