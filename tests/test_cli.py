from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from chartkeeper.cli import cli, main
from chartkeeper.exceptions import FileOperationError
from chartkeeper.utils.logger import disable_logging
from chartkeeper.utils.console import reconfigure_console


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run each CLI test from an empty directory with colors disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.delenv("CHARTKEEPER_CONFIG", raising=False)
    reconfigure_console()

    yield

    disable_logging()
    logging.getLogger("chartkeeper").propagate = True
    reconfigure_console()


@pytest.fixture
def manifests(tmp_path: Path, load_fixture: Callable[[str], str]) -> Path:
    """Write a Sveltos manifest and an unrelated manifest into ``deploy/``."""
    deploy = tmp_path / "deploy"
    deploy.mkdir()
    (deploy / "clusterprofile.yaml").write_text(load_fixture("validClusterProfile.yml"))
    (deploy / "app.yaml").write_text(load_fixture("randomManifest.yml"))
    (deploy / "notes.txt").write_text("not a manifest")
    return deploy


@pytest.mark.integration
class TestExtractCommand:
    """Tests for ``chartkeeper extract``."""

    def test_json_output(self, manifests: Path) -> None:
        result = CliRunner().invoke(cli, ["extract", "deploy", "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [item["file"] for item in payload] == ["deploy/clusterprofile.yaml"]
        deps = payload[0]["deps"]
        assert [d["depName"] for d in deps] == [
            "prometheus",
            "kyverno",
            "kyverno-policies",
            "registry-1.docker.io/bitnamicharts/vault",
            "custom-registry:443/charts/vault-sidecar",
        ]
        assert {d["depType"] for d in deps} == {"cluster-profile"}

    def test_defaults_to_current_directory(self, manifests: Path) -> None:
        result = CliRunner().invoke(cli, ["extract", "-f", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)[0]["file"] == "deploy/clusterprofile.yaml"

    def test_table_output(self, manifests: Path) -> None:
        result = CliRunner().invoke(cli, ["extract", "deploy"])

        assert result.exit_code == 0, result.output
        assert "prometheus" in result.output
        assert "kyverno" in result.output

    def test_nothing_found(self, tmp_path: Path, load_fixture: Callable[[str], str]) -> None:
        (tmp_path / "app.yaml").write_text(load_fixture("randomManifest.yml"))

        result = CliRunner().invoke(cli, ["extract", "app.yaml"])

        assert result.exit_code == 0
        assert "No Sveltos chart dependencies found" in result.output

    def test_nothing_found_json(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        result = CliRunner().invoke(cli, ["extract", "empty.yaml", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_explicit_file_outside_patterns(
        self, tmp_path: Path, load_fixture: Callable[[str], str]
    ) -> None:
        (tmp_path / "profile.sveltos").write_text(load_fixture("validProfile.yml"))

        result = CliRunner().invoke(cli, ["extract", "profile.sveltos", "-f", "json"])

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)[0]["deps"]) == 5

    def test_no_recursive(self, manifests: Path) -> None:
        result = CliRunner().invoke(cli, ["extract", "--no-recursive", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_config_file_patterns(self, tmp_path: Path, manifests: Path) -> None:
        (tmp_path / "chartkeeper.toml").write_text(
            "[chartkeeper]\nfile_patterns = ['app.yaml']\n", encoding="utf-8"
        )

        result = CliRunner().invoke(cli, ["extract", "-f", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == []

    def test_config_registry_aliases(self, tmp_path: Path) -> None:
        (tmp_path / "profile.yaml").write_text(
            "apiVersion: config.projectsveltos.io/v1beta1\n"
            "kind: Profile\n"
            "spec:\n"
            "  helmCharts:\n"
            "  - repositoryURL: internal\n"
            "    chartName: internal/app\n"
            "    chartVersion: 1.2.3\n"
        )
        config = tmp_path / "custom.toml"
        config.write_text(
            "[chartkeeper.registry_aliases]\ninternal = 'https://charts.example.com'\n"
        )

        result = CliRunner().invoke(
            cli, ["--config", str(config), "extract", "profile.yaml", "-f", "json"]
        )

        assert result.exit_code == 0, result.output
        dep = json.loads(result.output)[0]["deps"][0]
        assert dep["registryUrls"] == ["https://charts.example.com"]

    def test_invalid_config_exits_one(self, tmp_path: Path) -> None:
        (tmp_path / "chartkeeper.toml").write_text("[chartkeeper]\nbogus = 1\n")

        result = CliRunner().invoke(cli, ["extract"])

        assert result.exit_code == 1
        assert "Unknown configuration keys" in result.output

    def test_unreadable_file_exits_one(self, manifests: Path) -> None:
        with patch(
            "chartkeeper.commands.extract.safe_read_file",
            side_effect=FileOperationError("Failed to read file: denied"),
        ):
            result = CliRunner().invoke(cli, ["extract", "deploy"])

        assert result.exit_code == 1
        assert "Failed to read file" in result.output

    def test_missing_path_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["extract", "does-not-exist.yaml"])

        assert result.exit_code == 2


@pytest.mark.integration
class TestMainEntryPoint:
    """Tests for chartkeeper.cli.main exit codes."""

    def test_version(self, capsys: pytest.CaptureFixture) -> None:
        with patch("sys.argv", ["chartkeeper", "--version"]):
            assert main() == 0

        assert "chartkeeper 0.1.0.dev0" in capsys.readouterr().out

    def test_extract_success(self, manifests: Path) -> None:
        with patch("sys.argv", ["chartkeeper", "extract", "deploy", "-f", "json"]):
            assert main() == 0

    def test_usage_error(self) -> None:
        with patch("sys.argv", ["chartkeeper", "--no-such-option"]):
            assert main() == 2

    def test_unexpected_error(self) -> None:
        with patch("sys.argv", ["chartkeeper", "extract"]):
            with patch(
                "chartkeeper.commands.extract.find_manifest_files",
                side_effect=RuntimeError("boom"),
            ):
                assert main() == 1

    def test_keyboard_interrupt(self) -> None:
        with patch("sys.argv", ["chartkeeper", "extract"]):
            with patch(
                "chartkeeper.commands.extract.find_manifest_files",
                side_effect=KeyboardInterrupt,
            ):
                assert main() == 130
