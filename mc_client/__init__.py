"""URL resolution for the mc object storage client."""

from mc_client.errors import (
    AliasResolutionError,
    ClassificationError,
    ConfigError,
    ConfigLoadError,
    EmptyInputError,
    InvalidURLError,
    MCError,
    UnsupportedSchemeError,
    URLParseError,
)
from mc_client.models import BucketObject, URLType
from mc_client.resolver import URLResolver
from mc_client.urls import (
    bucket_only,
    canonicalize_local_file,
    classify,
    extract_host,
    is_local_file,
    is_supported,
    split_bucket_object,
)

__all__ = [
    "AliasResolutionError",
    "BucketObject",
    "ClassificationError",
    "ConfigError",
    "ConfigLoadError",
    "EmptyInputError",
    "InvalidURLError",
    "MCError",
    "URLParseError",
    "URLResolver",
    "URLType",
    "UnsupportedSchemeError",
    "bucket_only",
    "canonicalize_local_file",
    "classify",
    "extract_host",
    "is_local_file",
    "is_supported",
    "split_bucket_object",
]
