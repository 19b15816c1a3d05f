"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from weighted_graph import Graph, InvalidVertexError
from weighted_graph.config import AppConfig, GraphConfig, get_config, reset_config


def test_defaults():
    config = get_config()

    assert config.graph.edge_validation == "legacy"
    assert config.search.dfs_neighbor_order == "insertion"
    assert config.observability.level == "INFO"
    assert config.observability.structured is False


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_environment_override(monkeypatch):
    monkeypatch.setenv("WG_GRAPH_EDGE_VALIDATION", "strict")
    monkeypatch.setenv("WG_LOG_STRUCTURED", "true")

    config = AppConfig()

    assert config.graph.edge_validation == "strict"
    assert config.observability.structured is True


def test_invalid_policy_rejected():
    with pytest.raises(ValidationError):
        GraphConfig(edge_validation="sometimes")


def test_graph_uses_global_config(monkeypatch):
    monkeypatch.setenv("WG_GRAPH_EDGE_VALIDATION", "strict")
    graph = Graph()
    graph.add_vertex("A", 0)

    with pytest.raises(InvalidVertexError):
        graph.add_directed_edge("A", "ghost", 1)
