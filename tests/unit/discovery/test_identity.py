"""Unit tests for identity resolution."""

from typing import Any
from unittest.mock import MagicMock

from zapctl.capabilities.base import ManifestReader, MetadataQuery
from zapctl.discovery.identity import (
    display_name_for,
    extract_manifest_aliases,
    normalize_alnum,
    normalize_no_spaces,
    resolve_identity,
)
from zapctl.models.application import Application

from fakes import FakeManifestReader, FakeMetadata


class TestNormalization:
    """Tests for the name normalization helpers."""

    def test_no_spaces_lowercases_and_strips_whitespace(self) -> None:
        """Whitespace is removed and letters are lower-cased."""
        assert normalize_no_spaces("Visual Studio\tCode") == "visualstudiocode"

    def test_alnum_drops_punctuation(self) -> None:
        """Only letters and digits remain."""
        assert normalize_alnum("Foo-Bar 2.0!") == "foobar20"

    def test_display_name_strips_app_suffix(self) -> None:
        """A trailing .app is removed from the display name."""
        app = Application(name="Foo.app", install_path="/Applications/Foo.app")
        assert display_name_for(app) == "Foo"

    def test_display_name_keeps_plain_name(self) -> None:
        """Names without .app are unchanged."""
        app = Application(name="Foo", install_path="/Applications/Foo.app")
        assert display_name_for(app) == "Foo"


class TestExtractManifestAliases:
    """Tests for extract_manifest_aliases."""

    def test_none_manifest(self) -> None:
        """A missing manifest yields no aliases."""
        assert extract_manifest_aliases(None) == frozenset()

    def test_collects_string_values(self, sample_info_plist: dict[str, Any]) -> None:
        """Identifier keys with string values become aliases."""
        aliases = extract_manifest_aliases(sample_info_plist)

        assert aliases == frozenset({"Bar", "com.bar.app", "Bar Pro"})

    def test_ignores_non_string_and_blank_values(self) -> None:
        """Non-string and blank values are skipped."""
        manifest = {"CFBundleName": 42, "CFBundleExecutable": "  ", "CFBundleIdentifier": "x.y"}

        assert extract_manifest_aliases(manifest) == frozenset({"x.y"})


class TestResolveIdentity:
    """Tests for resolve_identity."""

    def test_bundle_id_from_metadata(self) -> None:
        """Metadata supplies the bundle identifier."""
        app = Application(name="Foo", install_path="/Applications/Foo.app")

        identity = resolve_identity(app, FakeMetadata("com.foo.app"), FakeManifestReader())

        assert identity.display_name == "Foo"
        assert identity.normalized_no_spaces == "foo"
        assert identity.normalized_alnum == "foo"
        assert identity.bundle_identifier == "com.foo.app"
        assert identity.manifest_aliases == frozenset()

    def test_no_metadata_and_no_manifest(self) -> None:
        """Without metadata or manifest, the identity still resolves."""
        app = Application(name="My App", install_path="/Applications/My App.app")

        identity = resolve_identity(app, FakeMetadata(None), FakeManifestReader(None))

        assert identity.bundle_identifier is None
        assert identity.identifiers() == ["My App", "myapp"]

    def test_manifest_bundle_id_fallback(self, sample_info_plist: dict[str, Any]) -> None:
        """The manifest's CFBundleIdentifier is used when metadata has none."""
        app = Application(name="Bar", install_path="/Applications/Bar.app")

        identity = resolve_identity(app, FakeMetadata(None), FakeManifestReader(sample_info_plist))

        assert identity.bundle_identifier == "com.bar.app"
        assert "Bar Pro" in identity.manifest_aliases

    def test_metadata_wins_over_manifest(self, sample_info_plist: dict[str, Any]) -> None:
        """Metadata takes precedence over the manifest bundle identifier."""
        app = Application(name="Bar", install_path="/Applications/Bar.app")

        identity = resolve_identity(
            app, FakeMetadata("com.bar.real"), FakeManifestReader(sample_info_plist)
        )

        assert identity.bundle_identifier == "com.bar.real"

    def test_metadata_queried_with_install_path(self) -> None:
        """Metadata is looked up by the bundle path."""
        metadata = FakeMetadata("com.foo")
        app = Application(name="Foo", install_path="/Applications/Foo.app")

        resolve_identity(app, metadata, FakeManifestReader())

        assert metadata.queried == ["/Applications/Foo.app"]

    def test_metadata_failure_falls_back_to_manifest(self) -> None:
        """A crashing metadata query degrades to the Info.plist identifier."""
        metadata = MagicMock(spec=MetadataQuery)
        metadata.query_bundle_identifier.side_effect = RuntimeError("mdworker crashed")
        app = Application(name="Foo", install_path="/Applications/Foo.app")

        identity = resolve_identity(
            app, metadata, FakeManifestReader({"CFBundleIdentifier": "com.foo.app"})
        )

        assert identity.bundle_identifier == "com.foo.app"

    def test_metadata_failure_without_manifest(self) -> None:
        """A crashing metadata query with no manifest leaves no bundle identifier."""
        metadata = MagicMock(spec=MetadataQuery)
        metadata.query_bundle_identifier.side_effect = RuntimeError("mdworker crashed")
        app = Application(name="Foo", install_path="/Applications/Foo.app")

        identity = resolve_identity(app, metadata, FakeManifestReader())

        assert identity.bundle_identifier is None
        assert identity.display_name == "Foo"

    def test_manifest_failure_yields_no_aliases(self) -> None:
        """A manifest reader error is treated as a missing manifest."""
        reader = MagicMock(spec=ManifestReader)
        reader.read_manifest.side_effect = ValueError("corrupt plist")
        app = Application(name="Foo", install_path="/Applications/Foo.app")

        identity = resolve_identity(app, FakeMetadata("com.foo"), reader)

        assert identity.manifest_aliases == frozenset()
        assert identity.bundle_identifier == "com.foo"
