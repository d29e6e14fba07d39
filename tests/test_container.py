"""Tests for container loading and the domain model helpers."""

import sys
import types

import pytest

from hubinvest_grpc.container import Container, load_container
from hubinvest_grpc.errors import ContainerLoadError
from hubinvest_grpc.models import AssetModel


@pytest.fixture
def container_module(monkeypatch: pytest.MonkeyPatch, container) -> types.ModuleType:
    """Register an importable module exposing containers in several shapes."""
    def broken():
        raise RuntimeError("no database")

    module = types.ModuleType("fake_containers")
    module.ready = container
    module.build = lambda: container
    module.FakeContainer = type(container)
    module.broken = broken
    module.not_a_container = object()
    monkeypatch.setitem(sys.modules, "fake_containers", module)
    return module


class TestLoadContainer:
    def test_fake_satisfies_protocol(self, container) -> None:
        assert isinstance(container, Container)

    def test_ready_instance(self, container_module: types.ModuleType) -> None:
        assert load_container("fake_containers:ready") is container_module.ready

    def test_factory_function(self, container_module: types.ModuleType) -> None:
        assert load_container("fake_containers:build") is container_module.ready

    def test_factory_failure(self, container_module: types.ModuleType) -> None:
        with pytest.raises(ContainerLoadError, match="no database"):
            load_container("fake_containers:broken")

    def test_class_without_defaults_fails(self, container_module: types.ModuleType) -> None:
        # FakeContainer requires a token service argument
        with pytest.raises(ContainerLoadError):
            load_container("fake_containers:FakeContainer")

    def test_not_a_container(self, container_module: types.ModuleType) -> None:
        with pytest.raises(ContainerLoadError, match="did not produce a Container"):
            load_container("fake_containers:not_a_container")

    @pytest.mark.parametrize("path", ["", "fake_containers", ":build", "fake_containers:"])
    def test_malformed_path(self, path: str) -> None:
        with pytest.raises(ContainerLoadError, match="module:attribute"):
            load_container(path)

    def test_missing_module(self) -> None:
        with pytest.raises(ContainerLoadError, match="cannot import"):
            load_container("hubinvest_grpc.no_such_module:build")

    def test_missing_attribute(self, container_module: types.ModuleType) -> None:
        with pytest.raises(ContainerLoadError, match="has no attribute"):
            load_container("fake_containers:missing")

    def test_error_is_import_error(self) -> None:
        assert issubclass(ContainerLoadError, ImportError)


class TestAssetModel:
    def test_calculations(self) -> None:
        asset = AssetModel(symbol="VOO", quantity=5, average_price=400.0, last_price=380.0)

        assert asset.calculate_investment() == 2000.0
        assert asset.calculate_current_value() == 1900.0
        assert asset.calculate_pnl() == -100.0
        assert asset.calculate_pnl_percentage() == -5.0
