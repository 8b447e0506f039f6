"""
Command-line argument to URL resolution.

Turns raw arguments into URLs a storage command can act on: empty arguments
fall back to the default host, aliases are expanded, unsupported schemes are
rejected and local paths are rewritten to canonical ``file:///`` URLs.
"""

from collections.abc import Iterable
from typing import Protocol

from mc_client.config import Settings
from mc_client.errors import ConfigError, MCError, UnsupportedSchemeError
from mc_client.logging import get_logger
from mc_client.urls import canonicalize_local_file, is_local_file, is_supported

logger = get_logger(__name__)


class DefaultHostProvider(Protocol):
    """Source of the host used for empty arguments."""

    def get_default_host(self) -> str: ...


class AliasExpander(Protocol):
    """Expands alias prefixes in raw arguments."""

    def expand(self, url: str) -> str: ...


class URLResolver:
    """
    Resolves command-line arguments to canonical URLs.

    Parameters
    ----------
    config : DefaultHostProvider
        Consulted only when an argument is empty.
    aliases : AliasExpander
        Applied to every argument before validation.
    """

    def __init__(self, config: DefaultHostProvider, aliases: AliasExpander):
        self.config = config
        self.aliases = aliases

    @classmethod
    def from_settings(cls, settings: Settings) -> "URLResolver":
        """Build a resolver backed by loaded settings."""
        return cls(settings, settings.alias_table())

    def resolve_argument(self, arg: str) -> str:
        """
        Resolve a single command-line argument.

        Steps run in a fixed order and the first failure stops resolution:
        default host (empty argument only), alias expansion, scheme check,
        local file canonicalization.

        Parameters
        ----------
        arg : str
            Raw argument; empty means "use the default host".

        Returns
        -------
        str
            Object storage URL unchanged, or canonical local file URL.

        Raises
        ------
        ConfigError
            If ``arg`` is empty and no default host is configured.
        AliasResolutionError
            If alias expansion fails.
        UnsupportedSchemeError
            If the expanded URL is not object storage or local file.
        InvalidURLError
            If a local file URL carries a host.
        """
        url = arg
        if url == "":
            url = self.config.get_default_host()
            if not url:
                raise ConfigError("no default host configured", op="resolve", url=arg)

        url = self.aliases.expand(url)

        if not is_supported(url):
            raise UnsupportedSchemeError("unsupported URL scheme", op="resolve", url=arg or url)

        if is_local_file(url):
            url = canonicalize_local_file(url)

        logger.debug("Resolved argument", arg=arg, url=url)
        return url

    def resolve_arguments(self, args: Iterable[str]) -> list[str]:
        """
        Resolve all command-line arguments, preserving order.

        Resolution stops at the first failing argument; nothing resolved
        before it is returned.

        Parameters
        ----------
        args : Iterable[str]
            Raw arguments.

        Returns
        -------
        list[str]
            Resolved URLs in argument order.

        Raises
        ------
        MCError
            The error of the first failing argument, with ``position`` set.
        """
        urls: list[str] = []
        for position, arg in enumerate(args):
            try:
                urls.append(self.resolve_argument(arg))
            except MCError as e:
                e.position = position
                logger.warning(
                    "Rejected argument", position=position, arg=arg, error=e.message, op=e.op
                )
                raise
        return urls
