"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for file locations,
default edge weight, start node, engine selection and logging.

Configuration can be overridden via environment variables:
- PATHFINDER_GRAPH_DATA_DIR=/path/to/data
- PATHFINDER_GRAPH_INPUT_FILE=facebook_combined.txt.gz
- PATHFINDER_GRAPH_START_NODE=0
- PATHFINDER_ENGINE_DEFAULT_ALGORITHM=dijkstra
- PATHFINDER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Algorithm = Literal["dijkstra", "bellman_ford", "both"]


class GraphConfig(BaseSettings):
    """Edge-list file configuration.

    Environment variables prefixed with PATHFINDER_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    input_file: str = "edges.txt.gz"
    output_file: str = "graph.edgelist"
    default_weight: int = 1
    start_node: int = 0

    @property
    def input_path(self) -> Path:
        """Full path to the edge-list input file."""
        return self.data_dir / self.input_file

    @property
    def output_path(self) -> Path:
        """Full path to the edge-list export file."""
        return self.data_dir / self.output_file


class EngineConfig(BaseSettings):
    """Shortest-path engine selection.

    Environment variables prefixed with PATHFINDER_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_ENGINE_")

    default_algorithm: Algorithm = "both"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHFINDER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.input_path)
        print(config.engine.default_algorithm)

    Environment variables prefixed with PATHFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
