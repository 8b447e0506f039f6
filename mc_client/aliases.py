"""
Alias expansion for command-line URLs.

An alias is a short name for an object storage endpoint, so that
``s3:bucket/object`` stands for ``https://s3.amazonaws.com/bucket/object``.
"""

import re
from collections.abc import Mapping

from mc_client.errors import AliasResolutionError, URLParseError
from mc_client.urls import parse_url, url_host

DEFAULT_ALIASES: dict[str, str] = {
    "s3": "https://s3.amazonaws.com",
    "play": "https://play.minio.io:9000",
    "localhost": "http://localhost:9000",
}

# Scheme names would shadow real URLs
RESERVED_ALIAS_NAMES = frozenset({"http", "https", "file"})

_ALIAS_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


def validate_alias_name(name: str) -> str:
    """
    Check that ``name`` can be used as an alias.

    Parameters
    ----------
    name : str
        Alias name.

    Returns
    -------
    str
        The name, unchanged.

    Raises
    ------
    AliasResolutionError
        If the name is malformed or reserved.
    """
    if not _ALIAS_NAME.match(name):
        raise AliasResolutionError(
            "alias name must start with a letter and contain only letters, digits and '-'",
            op="alias",
            url=name,
        )
    if name.lower() in RESERVED_ALIAS_NAMES:
        raise AliasResolutionError(f"alias name {name!r} is reserved", op="alias", url=name)
    return name


class AliasTable:
    """
    Read-only alias lookup table.

    Parameters
    ----------
    aliases : Mapping[str, str]
        Alias name to endpoint URL.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None):
        self.aliases = dict(DEFAULT_ALIASES if aliases is None else aliases)
        # Prefixes are matched like URL schemes, without regard to case
        self._by_name = {name.lower(): target for name, target in self.aliases.items()}

    def expand(self, url: str) -> str:
        """
        Expand a leading ``alias:`` prefix into the alias endpoint.

        Alias names match case-insensitively. Tokens that do not start with a
        known alias, and tokens that already name a host, are returned unchanged.

        Parameters
        ----------
        url : str
            Raw token.

        Returns
        -------
        str
            Expanded URL.

        Raises
        ------
        AliasResolutionError
            If the expanded URL is not a valid URL.
        """
        try:
            parts = parse_url(url)
        except URLParseError:
            return url
        if url_host(parts):
            return url

        name, sep, rest = url.partition(":")
        target = self._by_name.get(name.lower()) if sep else None
        if target is None:
            return url

        # An alias without endpoint, or a rest that looks like another URL, is left alone
        if not target or ":" in rest:
            return url

        expanded = target.rstrip("/") + "/" + rest.lstrip("/\\")
        try:
            parse_url(expanded)
        except URLParseError as e:
            raise AliasResolutionError(
                f"alias {name!r} expands to an invalid URL {expanded!r}: {e.message}",
                op="alias",
                url=url,
            ) from e
        return expanded
