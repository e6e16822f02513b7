from __future__ import annotations

import logging

import pytest

from labelled_graphs import (
    ConfigError,
    LabelledDiGraph,
    LabelledGraph,
    MetaDiGraph,
    MetaGraph,
    SimpleDiGraph,
    SimpleGraph,
    configure_logging,
    get_settings,
)
from labelled_graphs.config import AppSettings, LoggingSettings, resolve_backend


def test_defaults() -> None:
    settings = get_settings()
    assert settings.backends.undirected == "SimpleGraph"
    assert settings.backends.directed == "SimpleDiGraph"
    assert LabelledGraph.default_backend() is SimpleGraph
    assert LabelledDiGraph.default_backend() is SimpleDiGraph


def test_env_selects_default_backends(monkeypatch) -> None:
    monkeypatch.setenv("LABELLED_GRAPHS_BACKENDS__UNDIRECTED", "MetaGraph")
    monkeypatch.setenv("LABELLED_GRAPHS_BACKENDS__DIRECTED", "MetaDiGraph")
    get_settings.cache_clear()

    lg = LabelledGraph(["a", "b"])
    dg = LabelledDiGraph(["a", "b"])
    assert isinstance(lg.backend, MetaGraph)
    assert isinstance(dg.backend, MetaDiGraph)

    lg.set_property("a", "x", 1)
    assert lg.get_property("a", "x") == 1


def test_unknown_backend_name(monkeypatch) -> None:
    monkeypatch.setenv("LABELLED_GRAPHS_BACKENDS__UNDIRECTED", "NoSuchGraph")
    get_settings.cache_clear()
    with pytest.raises(ConfigError):
        get_settings()


def test_backend_directedness_is_checked(monkeypatch) -> None:
    monkeypatch.setenv("LABELLED_GRAPHS_BACKENDS__UNDIRECTED", "SimpleDiGraph")
    get_settings.cache_clear()
    with pytest.raises(ConfigError):
        get_settings()
    with pytest.raises(ConfigError):
        resolve_backend("MetaGraph", directed=True)
    assert resolve_backend("MetaGraph") is MetaGraph


def test_configure_logging() -> None:
    settings = AppSettings(logging=LoggingSettings(level="DEBUG"))
    logger = configure_logging(settings)
    try:
        assert logger.name == "labelled_graphs"
        assert logger.level == logging.DEBUG
        assert logger.handlers
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_debug_records_for_mutations(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="labelled_graphs")
    lg = LabelledGraph(["a", "b"])
    lg.add_vertex("c")
    lg.add_edge("a", "c")
    messages = [r.getMessage() for r in caplog.records]
    assert any("add_vertex 'c' -> 2" in m for m in messages)
    assert any(m.startswith("add_edge 'a' -> 'c'") for m in messages)
