"""Unit tests for the public uninstall operations."""

from zapctl.core.config import UninstallConfig
from zapctl.core.report import UninstallStatus
from zapctl.core.uninstall import (
    Uninstaller,
    build_plan,
    discover_artifacts,
    execute,
    resolve_identity,
)
from zapctl.models.application import Application
from zapctl.models.plan import FailureReason, RemovalState

from fakes import HOME, FakeFilesystem, FakeManifestReader, FakeMetadata, FakePrivilegedExecutor

FOO = Application(name="Foo", install_path="/Applications/Foo.app")
FOO_CACHE = f"{HOME}/Library/Caches/Foo"


class TestPipeline:
    """The four operations chained by hand."""

    def test_single_artifact_app(self, fast_config: UninstallConfig) -> None:
        """An app with one cache directory is fully removed without escalation."""
        fs = FakeFilesystem({FOO.install_path: 4096, FOO_CACHE: 2048})
        privileged = FakePrivilegedExecutor(fs)

        identity = resolve_identity(
            FOO, metadata=FakeMetadata(None), manifest_reader=FakeManifestReader(None)
        )
        artifacts = discover_artifacts(identity, prober=fs, home=HOME)
        plan = build_plan(FOO, artifacts, prober=fs)
        outcome = execute(plan, fast_config, prober=fs, privileged=privileged)

        assert [a.path for a in artifacts] == [FOO_CACHE]
        assert artifacts[0].size_bytes == 2048
        assert plan.paths == [FOO.install_path, FOO_CACHE]
        assert outcome.state == RemovalState.COMPLETED
        assert outcome.removed_count == 2
        assert privileged.batches == []

    def test_planning_deletes_nothing(self) -> None:
        """Resolving, discovering and planning never remove files."""
        fs = FakeFilesystem({FOO.install_path: 1, FOO_CACHE: 1})
        before = dict(fs.files)

        identity = resolve_identity(
            FOO, metadata=FakeMetadata("com.foo"), manifest_reader=FakeManifestReader()
        )
        build_plan(FOO, discover_artifacts(identity, prober=fs, home=HOME), prober=fs)

        assert fs.files == before


class TestUninstaller:
    """Tests for the Uninstaller facade."""

    def _uninstaller(
        self, fs: FakeFilesystem, config: UninstallConfig, **kwargs: object
    ) -> Uninstaller:
        return Uninstaller(
            config=config,
            metadata=FakeMetadata("com.bar.app"),
            manifest_reader=FakeManifestReader(),
            prober=fs,
            privileged=FakePrivilegedExecutor(fs, **kwargs),  # type: ignore[arg-type]
            home=HOME,
        )

    def test_config_exclusions_applied(self) -> None:
        """Configured exclusions keep existing paths out of the plan."""
        bar = Application(name="Bar", install_path="/Applications/Bar.app")
        daemon = "/Library/LaunchDaemons/com.bar.app.plist"
        fs = FakeFilesystem({bar.install_path: 1, daemon: 1})
        config = UninstallConfig(excluded_paths=("/Library/LaunchDaemons",))

        plan = self._uninstaller(fs, config).plan(bar)

        assert daemon not in plan.paths

    def test_uninstall_report(self, fast_config: UninstallConfig) -> None:
        """uninstall returns a completed report."""
        fs = FakeFilesystem({FOO.install_path: 1, FOO_CACHE: 1})

        report = self._uninstaller(fs, fast_config).uninstall(FOO)

        assert report.status == UninstallStatus.COMPLETED
        assert report.removed_count == 2
        assert fs.files == {}

    def test_uninstall_declined(self, fast_config: UninstallConfig) -> None:
        """A declined prompt produces a failed report."""
        fs = FakeFilesystem({FOO.install_path: 1})

        report = self._uninstaller(
            fs, fast_config, protected={FOO.install_path}, decline=True
        ).uninstall(FOO)

        assert report.status == UninstallStatus.FAILED
        assert report.reason == FailureReason.ESCALATION_DECLINED
        assert FOO.install_path in fs.files
