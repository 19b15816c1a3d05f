"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- WG_GRAPH_EDGE_VALIDATION=permissive
- WG_SEARCH_DFS_NEIGHBOR_ORDER=lexicographic
- WG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Storage model configuration.

    Environment variables prefixed with WG_GRAPH_.

    ``edge_validation`` selects the rule applied by add_directed_edge:
    - legacy: reject only an unregistered source with a registered destination
    - permissive: accept every edge
    - strict: require payload entries for both endpoints
    """

    model_config = SettingsConfigDict(env_prefix="WG_GRAPH_")

    edge_validation: Literal["legacy", "permissive", "strict"] = "legacy"


class SearchConfig(BaseSettings):
    """Traversal configuration.

    Environment variables prefixed with WG_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_SEARCH_")

    # Order in which a popped vertex's neighbors are pushed onto the DFS stack.
    dfs_neighbor_order: Literal["insertion", "lexicographic"] = "insertion"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with WG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edge_validation)
        print(config.search.dfs_neighbor_order)

    Environment variables prefixed with WG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
