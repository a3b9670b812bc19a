"""Tests for configuration and the dependency injection container."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from cityroute.config import (
    AppConfig,
    GraphConfig,
    ObservabilityConfig,
    SearchConfig,
    configure_logging,
    get_config,
    reset_config,
)
from cityroute.container import Container, get_container, reset_container
from cityroute.domain.errors import ConfigurationError
from cityroute.domain.models import SearchAlgorithm
from cityroute.ports.graph import GraphRepositoryPort
from cityroute.services import RoutePlannerService


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_defaults():
    config = get_config()
    assert config.graph.cities_file == "cities.csv"
    assert config.graph.infinity_weight == 99999
    assert config.graph.cities_path == config.graph.data_dir / "cities.csv"
    assert config.search.algorithms == ["dfs", "bfs"]
    assert get_config() is config


def test_bundled_data_dir_exists():
    assert get_config().graph.cities_path.is_file()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CITYROUTE_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CITYROUTE_GRAPH_CITIES_FILE", "other.csv")
    monkeypatch.setenv("CITYROUTE_LOG_LEVEL", "DEBUG")

    config = get_config()
    assert config.graph.cities_path == Path(tmp_path) / "other.csv"
    assert config.observability.level == "DEBUG"


def test_invalid_settings_rejected():
    with pytest.raises(ValidationError):
        SearchConfig(algorithms=[])
    with pytest.raises(ValidationError):
        SearchConfig(algorithms=["astar"])
    with pytest.raises(ValidationError):
        GraphConfig(infinity_weight=0)
    with pytest.raises(ValidationError):
        GraphConfig(infinity_weight=500)


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        configure_logging(ObservabilityConfig(level="debug"))
        assert root.level == logging.DEBUG
        configure_logging(ObservabilityConfig(level="not-a-level"))
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


@pytest.mark.parametrize(
    "name,expected", [("dfs", SearchAlgorithm.DFS), (" BFS ", SearchAlgorithm.BFS)]
)
def test_algorithm_from_name(name, expected):
    assert SearchAlgorithm.from_name(name) is expected


def test_algorithm_from_unknown_name():
    with pytest.raises(ConfigurationError) as exc_info:
        SearchAlgorithm.from_name("astar")
    assert exc_info.value.setting_name == "algorithms"


class TestContainer:
    def test_default_bindings(self, tmp_path):
        config = AppConfig(
            graph=GraphConfig(data_dir=tmp_path),
            search=SearchConfig(algorithms=["bfs", "dfs"]),
        )
        container = Container.create_default(config)

        planner = container.resolve(RoutePlannerService)
        assert planner is container.resolve(RoutePlannerService)
        assert planner.graph_repository is container.resolve(GraphRepositoryPort)
        assert [solver.algorithm for solver in planner.solvers] == [
            SearchAlgorithm.BFS,
            SearchAlgorithm.DFS,
        ]

    def test_unregistered_type_raises(self):
        with pytest.raises(KeyError):
            Container().resolve(RoutePlannerService)

    def test_transient_registration(self):
        container = Container()
        container.register(list, list, singleton=False)
        assert container.resolve(list) is not container.resolve(list)
        assert container.is_registered(list)

        container.clear_all()
        assert not container.is_registered(list)

    def test_reregistration_replaces_singleton(self):
        container = Container()
        container.register(str, lambda: "first")
        assert container.resolve(str) == "first"
        container.register(str, lambda: "second")
        assert container.resolve(str) == "second"

    def test_global_container_is_shared(self):
        assert get_container() is get_container()
