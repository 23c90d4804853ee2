from __future__ import annotations

import json

import pytest

from chartkeeper.models import (
    Datasource,
    DependencyCategory,
    DependencyRecord,
    ExtractResult,
)


def _helm_record(**overrides) -> DependencyRecord:
    values = dict(
        dep_name="prometheus",
        current_value="23.4.0",
        datasource=Datasource.HELM,
        dep_type=DependencyCategory.CLUSTER_PROFILE,
        registry_urls=["https://prometheus-community.github.io/helm-charts"],
    )
    values.update(overrides)
    return DependencyRecord(**values)


@pytest.mark.unit
class TestDependencyRecord:
    """Tests for DependencyRecord."""

    def test_helm_to_dict(self) -> None:
        assert _helm_record().to_dict() == {
            "depName": "prometheus",
            "currentValue": "23.4.0",
            "datasource": "helm",
            "depType": "cluster-profile",
            "registryUrls": ["https://prometheus-community.github.io/helm-charts"],
        }

    def test_docker_to_dict_omits_registry_urls(self) -> None:
        record = DependencyRecord(
            dep_name="registry-1.docker.io/bitnamicharts/vault",
            current_value="0.7.2",
            datasource=Datasource.DOCKER,
            dep_type=DependencyCategory.PROFILE,
        )

        assert "registryUrls" not in record.to_dict()
        assert record.to_dict()["datasource"] == "docker"

    def test_to_dict_is_json_serializable(self) -> None:
        assert json.loads(json.dumps(_helm_record().to_dict()))["depName"] == "prometheus"

    def test_to_dict_copies_registry_urls(self) -> None:
        record = _helm_record()

        record.to_dict()["registryUrls"].append("https://other")

        assert record.registry_urls == ["https://prometheus-community.github.io/helm-charts"]

    def test_docker_rejects_registry_urls(self) -> None:
        with pytest.raises(ValueError, match="docker"):
            _helm_record(datasource=Datasource.DOCKER)

    def test_empty_registry_urls_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            _helm_record(registry_urls=[])

    def test_helm_without_registry_urls(self) -> None:
        record = _helm_record(registry_urls=None)

        assert "registryUrls" not in record.to_dict()


@pytest.mark.unit
class TestExtractResult:
    """Tests for ExtractResult."""

    def test_to_dict(self) -> None:
        result = ExtractResult(deps=[_helm_record(), _helm_record(dep_name="kyverno")])

        assert [d["depName"] for d in result.to_dict()["deps"]] == ["prometheus", "kyverno"]
        assert len(result) == 2

    def test_default_deps_independent(self) -> None:
        first = ExtractResult()
        second = ExtractResult()

        first.deps.append(_helm_record())

        assert second.deps == []
