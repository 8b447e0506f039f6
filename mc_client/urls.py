"""
URL classification, normalization and decomposition.

A command-line token is either a local filesystem path (``file`` scheme or
no scheme at all) or an object storage endpoint (``http``/``https``). These
functions are pure: they read nothing but their argument (and the current
working directory when a relative local path is made absolute).
"""

import os
import re
from urllib.parse import SplitResult, quote, unquote, urlsplit, urlunsplit

from mc_client.errors import (
    ClassificationError,
    EmptyInputError,
    InvalidURLError,
    URLParseError,
)
from mc_client.models import BucketObject, URLType

_OBJECT_STORAGE_SCHEMES = frozenset({"http", "https"})
_LOCAL_FILE_SCHEMES = frozenset({"file", ""})

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters left as-is when re-escaping a local path ("%" keeps existing escapes)
_PATH_SAFE = "/%:@!$&'()*+,;=~"
_CWD_SAFE = _PATH_SAFE.replace("%", "")


def parse_url(url: str) -> SplitResult:
    """
    Parse a token as a generic URL.

    Parameters
    ----------
    url : str
        Raw token, with or without a scheme.

    Returns
    -------
    SplitResult
        Parsed scheme, network location, path, query and fragment.

    Raises
    ------
    URLParseError
        If the token is not syntactically valid.
    """
    if _CONTROL_CHARS.search(url):
        raise URLParseError("invalid control character in URL", op="parse", url=url)
    if url.startswith(":"):
        raise URLParseError("missing protocol scheme", op="parse", url=url)

    # urlsplit strips leading spaces; such a token has no scheme, the spaces belong to the path
    leading_space = url.startswith(" ")
    try:
        parts = urlsplit("./" + url if leading_space else url)
        # port is validated lazily by urllib
        _ = parts.port
    except ValueError as e:
        raise URLParseError(str(e), op="parse", url=url) from e
    if leading_space:
        parts = parts._replace(path=parts.path[2:])

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise URLParseError(
                "first path segment in URL cannot contain colon", op="parse", url=url
            )

    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE.search(component):
            raise URLParseError(f"invalid URL escape in {component!r}", op="parse", url=url)

    return parts


def url_host(parts: SplitResult) -> str:
    """Return ``host[:port]`` of a parsed URL, without userinfo."""
    return parts.netloc.rpartition("@")[2]


def _url_type(parts: SplitResult) -> URLType:
    if parts.scheme in _OBJECT_STORAGE_SCHEMES:
        return URLType.OBJECT_STORAGE
    if parts.scheme in _LOCAL_FILE_SCHEMES:
        return URLType.LOCAL_FILE
    return URLType.UNKNOWN


def classify(url: str) -> URLType:
    """
    Detect the storage protocol of a URL.

    An unrecognised scheme is not an error: it yields ``URLType.UNKNOWN``.

    Parameters
    ----------
    url : str
        Raw token.

    Returns
    -------
    URLType
        OBJECT_STORAGE for http/https, LOCAL_FILE for file or no scheme,
        UNKNOWN otherwise.

    Raises
    ------
    URLParseError
        If the token is not syntactically valid.
    """
    return _url_type(parse_url(url))


def is_supported(url: str) -> bool:
    """
    Check whether a URL refers to a supported storage protocol.

    Malformed and valid-but-unsupported URLs both give False.
    """
    try:
        return classify(url) is not URLType.UNKNOWN
    except URLParseError:
        return False


def is_local_file(url: str) -> bool:
    """Check whether a URL refers to the local filesystem."""
    try:
        return classify(url) is URLType.LOCAL_FILE
    except URLParseError:
        return False


def _parse_local_file(url: str, op: str) -> SplitResult:
    if url == "":
        raise EmptyInputError("empty URL", op=op, url=url)
    parts = parse_url(url)
    url_type = _url_type(parts)
    if url_type is not URLType.LOCAL_FILE:
        raise ClassificationError(
            f"expected a local file URL, got {url_type.value}", op=op, url=url
        )
    return parts


def canonicalize_local_file(url: str) -> str:
    """
    Rewrite a local file URL to the ``file:///path/to/file`` form.

    A missing scheme is filled in with ``file`` and a relative path is joined
    onto the current working directory. The path is not otherwise cleaned,
    so applying this to its own output returns the same string.

    Parameters
    ----------
    url : str
        Local path or ``file`` URL.

    Returns
    -------
    str
        Canonical file URL with an empty host and an absolute path.

    Raises
    ------
    EmptyInputError
        If ``url`` is empty.
    URLParseError
        If ``url`` is not syntactically valid.
    ClassificationError
        If ``url`` does not refer to the local filesystem.
    InvalidURLError
        If ``url`` carries a host or userinfo (``file://host/path``,
        ``file://user@/path``).
    """
    parts = _parse_local_file(url, "canonicalize")

    # file:///path should always have an empty host
    host = url_host(parts)
    if host:
        raise InvalidURLError(
            f"local file URL must not have a host, got {host!r}", op="canonicalize", url=url
        )
    if parts.netloc:
        raise InvalidURLError(
            "local file URL must not have userinfo", op="canonicalize", url=url
        )

    path = quote(parts.path, safe=_PATH_SAFE)
    if not path.startswith("/"):
        # cwd is a filesystem path, not URL text: a "%" in it must be escaped
        cwd = quote(os.getcwd(), safe=_CWD_SAFE)
        path = cwd.rstrip("/") + "/" + path

    return urlunsplit(("file", "", path, parts.query, parts.fragment))


def extract_host(url: str) -> str:
    """
    Extract the host part of a local file URL.

    Genuine local paths have no host; a non-empty result (as for
    ``file://host/path``) means the token is not really a local path.

    Raises
    ------
    EmptyInputError
        If ``url`` is empty.
    URLParseError
        If ``url`` is not syntactically valid.
    ClassificationError
        If ``url`` does not refer to the local filesystem.
    """
    return url_host(_parse_local_file(url, "host"))


def split_bucket_object(url: str) -> BucketObject:
    """
    Split the path of a URL into bucket name and object key.

    The path ``/bucket/key/with/slashes`` maps to bucket ``bucket`` and
    object ``key/with/slashes``. An empty path is a valid, bucket-less URL.

    Parameters
    ----------
    url : str
        Any URL; malformed input is treated as having no bucket.

    Returns
    -------
    BucketObject
        Bucket and object; both empty when no bucket is present.

    Examples
    --------
    >>> split_bucket_object("https://s3.example.com/bucket/a/b")
    BucketObject(bucket='bucket', object='a/b')
    >>> split_bucket_object("/bucket")
    BucketObject(bucket='bucket', object='')
    """
    try:
        parts = parse_url(url)
    except URLParseError:
        return BucketObject("", "")

    path = unquote(parts.path)
    if not path:
        return BucketObject("", "")

    splits = path.split("/", 2)
    if len(splits) == 2:
        return BucketObject(splits[1], "")
    if len(splits) == 3 and splits[1]:
        return BucketObject(splits[1], splits[2])
    return BucketObject("", "")


def bucket_only(url: str) -> str:
    """Extract only the bucket name of a URL."""
    return split_bucket_object(url).bucket
