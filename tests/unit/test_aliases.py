"""Tests for alias expansion."""

import pytest

from mc_client.aliases import DEFAULT_ALIASES, AliasTable, validate_alias_name
from mc_client.errors import AliasResolutionError


@pytest.fixture
def aliases() -> AliasTable:
    """Create an AliasTable with the built-in aliases."""
    return AliasTable()


class TestExpand:
    """Tests for AliasTable.expand."""

    def test_expands_builtin_alias(self, aliases: AliasTable) -> None:
        """s3:bucket/obj expands to the S3 endpoint."""
        assert aliases.expand("s3:bucket/obj") == "https://s3.amazonaws.com/bucket/obj"

    def test_strips_leading_slashes(self, aliases: AliasTable) -> None:
        """Leading separators after the alias do not double up."""
        assert aliases.expand("play:/bucket") == "https://play.minio.io:9000/bucket"
        assert aliases.expand("play:\\bucket") == "https://play.minio.io:9000/bucket"

    def test_target_trailing_slash(self) -> None:
        """A trailing slash on the alias target is not duplicated."""
        table = AliasTable({"myminio": "http://10.0.0.1:9000/"})
        assert table.expand("myminio:bucket/a/b") == "http://10.0.0.1:9000/bucket/a/b"

    def test_alias_without_path(self, aliases: AliasTable) -> None:
        """An alias alone expands to the endpoint root."""
        assert aliases.expand("s3:") == "https://s3.amazonaws.com/"

    @pytest.mark.parametrize(
        "url",
        [
            "https://s3.amazonaws.com/bucket",
            "/tmp/data",
            "myfile.txt",
            "ftp://host/file",
            "unknown:bucket",
            ":foo",
            "",
        ],
    )
    def test_returns_non_alias_unchanged(self, aliases: AliasTable, url: str) -> None:
        """Tokens without a known alias prefix are not modified."""
        assert aliases.expand(url) == url

    def test_alias_name_is_case_insensitive(self, aliases: AliasTable) -> None:
        """Alias prefixes match regardless of case, like URL schemes."""
        assert aliases.expand("S3:bucket/obj") == "https://s3.amazonaws.com/bucket/obj"

        table = AliasTable({"MyMinio": "http://10.0.0.1:9000"})
        assert table.expand("myminio:b") == "http://10.0.0.1:9000/b"

    def test_rest_with_colon_unchanged(self, aliases: AliasTable) -> None:
        """A second colon means the token is not a simple alias path."""
        assert aliases.expand("s3:bucket:obj") == "s3:bucket:obj"

    def test_empty_target_unchanged(self) -> None:
        """An alias without endpoint leaves the token as is."""
        table = AliasTable({"local": ""})
        assert table.expand("local:bucket") == "local:bucket"

    def test_invalid_expansion_raises(self) -> None:
        """An alias pointing at a malformed URL raises AliasResolutionError."""
        table = AliasTable({"broken": "http://host:notaport"})

        with pytest.raises(AliasResolutionError, match="broken") as exc_info:
            table.expand("broken:bucket")

        assert exc_info.value.op == "alias"
        assert exc_info.value.url == "broken:bucket"

    def test_default_table(self) -> None:
        """AliasTable() uses the built-in aliases; an empty mapping has none."""
        assert AliasTable().aliases == DEFAULT_ALIASES
        assert AliasTable({}).expand("s3:bucket") == "s3:bucket"


class TestValidateAliasName:
    """Tests for validate_alias_name."""

    @pytest.mark.parametrize("name", ["s3", "play", "my-minio", "Local2"])
    def test_valid_names(self, name: str) -> None:
        """Well-formed names are returned unchanged."""
        assert validate_alias_name(name) == name

    @pytest.mark.parametrize("name", ["", "1abc", "my_alias", "a.b", "-x"])
    def test_malformed_names(self, name: str) -> None:
        """Names must start with a letter and use letters, digits or '-'."""
        with pytest.raises(AliasResolutionError, match="must start with a letter"):
            validate_alias_name(name)

    @pytest.mark.parametrize("name", ["http", "https", "file", "HTTP"])
    def test_reserved_names(self, name: str) -> None:
        """Scheme names cannot be aliases."""
        with pytest.raises(AliasResolutionError, match="reserved"):
            validate_alias_name(name)
