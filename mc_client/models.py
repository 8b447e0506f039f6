"""
Value types shared by the URL functions and the resolver.
"""

from enum import Enum
from typing import NamedTuple


class URLType(str, Enum):
    """
    Storage protocol a URL refers to.

    Derived from the URL scheme:
    - http, https: Minio and S3 compatible object storage
    - file, no scheme: POSIX compatible file systems
    - anything else: unknown (valid syntax, unsupported protocol)
    """

    UNKNOWN = "unknown"
    OBJECT_STORAGE = "object-storage"
    LOCAL_FILE = "local-file"


class BucketObject(NamedTuple):
    """Bucket name and object key extracted from a URL path."""

    bucket: str
    object: str
