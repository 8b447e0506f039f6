"""CLI for resolving and inspecting storage URLs."""

import argparse
import sys
from collections.abc import Sequence

from mc_client.config import Settings, load_settings
from mc_client.errors import MCError
from mc_client.logging import configure_logging
from mc_client.resolver import URLResolver
from mc_client.urls import classify, extract_host, split_bucket_object


def run_resolve(settings: Settings, urls: list[str]) -> None:
    """
    Resolve arguments and print one URL per line.

    Parameters
    ----------
    settings : Settings
        Loaded settings (default host and aliases).
    urls : list[str]
        Raw arguments. No arguments resolves the default host.
    """
    resolver = URLResolver.from_settings(settings)
    for url in resolver.resolve_arguments(urls or [""]):
        print(url)


def run_classify(url: str) -> None:
    """Print the storage type of a URL."""
    print(classify(url).value)


def run_split(url: str) -> None:
    """Print the bucket and object of a URL."""
    bucket, obj = split_bucket_object(url)
    print(f"bucket: {bucket}")
    print(f"object: {obj}")


def run_host(url: str) -> None:
    """Print the host of a local file URL."""
    print(extract_host(url))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mc-url",
        description="Resolve and inspect object storage and local file URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Canonicalize a local path
  mc-url resolve ./data/report.csv

  # Expand an alias
  mc-url resolve s3:mybucket/path/to/object

  # Resolve the default host (MC_DEFAULT_HOST)
  mc-url resolve

  # Inspect a URL
  mc-url classify https://play.minio.io:9000/bucket
  mc-url split https://play.minio.io:9000/bucket/a/b
        """,
    )
    parser.add_argument(
        "--default-host",
        help="Host used when no URL is given (default: MC_DEFAULT_HOST)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve arguments to canonical URLs",
    )
    resolve_parser.add_argument("urls", nargs="*", help="URLs, local paths or alias:path")

    classify_parser = subparsers.add_parser("classify", help="Print the storage type of a URL")
    classify_parser.add_argument("url", help="URL to classify")

    split_parser = subparsers.add_parser("split", help="Split a URL into bucket and object")
    split_parser.add_argument("url", help="URL to split")

    host_parser = subparsers.add_parser("host", help="Print the host of a local file URL")
    host_parser.add_argument("url", help="Local file URL")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        overrides: dict[str, str] = {}
        if args.default_host is not None:
            overrides["default_host"] = args.default_host
        settings = load_settings(**overrides)
        configure_logging(settings, component="cli")

        if args.command == "resolve":
            run_resolve(settings, args.urls)
        elif args.command == "classify":
            run_classify(args.url)
        elif args.command == "split":
            run_split(args.url)
        elif args.command == "host":
            run_host(args.url)
    except MCError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
