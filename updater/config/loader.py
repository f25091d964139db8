"""
Config Loader

Loads declarative update graph definitions from YAML files and builds
UpdateGraph instances from them.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field
import logging

from ..dag.action import Action
from ..dag.graph import UpdateGraph
from ..dag.registry import CallbackRegistry

logger = logging.getLogger(__name__)


class ActionConfig(BaseModel):
    """Configuration for one action"""
    name: str
    callback: Optional[str] = None
    triggers: List[str] = Field(default_factory=list)
    emits: List[str] = Field(default_factory=list)


class GraphConfig(BaseModel):
    """Complete update graph definition"""
    actions: List[ActionConfig] = Field(default_factory=list)


class ConfigLoader:
    """
    Loads and merges graph definitions from YAML.

    The loader accepts either a single YAML file or a directory; for a
    directory every `*.yaml` file is loaded in name order and the actions
    merged, with action names required to be unique across files.

    Example file:
        actions:
          - name: load_prices
            callback: load_prices
            triggers: [tick]
            emits: [prices]
          - name: recompute_pnl
            triggers: [prices]

    Example usage:
        config = ConfigLoader(Path("config/graph.yaml")).load()
        graph, actions = build_graph(config, registry)
    """

    def __init__(self, path: Path):
        """
        Initialize loader.

        Args:
            path: YAML file or directory of YAML files
        """
        self.path = Path(path)
        logger.info(f"Initialized ConfigLoader with path: {self.path}")

    def load(self) -> GraphConfig:
        """
        Load and merge every graph definition under the path.

        Returns:
            Merged GraphConfig

        Raises:
            ValueError: If the path is missing, has no YAML files, a file
                        fails to parse or validate, or names collide
        """
        if not self.path.exists():
            raise ValueError(f"Config path does not exist: {self.path}")

        if self.path.is_dir():
            yaml_files = sorted(self.path.glob("*.yaml"))
            if not yaml_files:
                raise ValueError(f"No YAML files found in {self.path}")
        else:
            yaml_files = [self.path]

        logger.info(f"Loading {len(yaml_files)} YAML files from {self.path}")

        configs = []
        for yaml_file in yaml_files:
            try:
                with open(yaml_file) as f:
                    raw = yaml.safe_load(f) or {}
                config = GraphConfig(**raw)
            except Exception as e:
                logger.error(f"Failed to load {yaml_file}: {e}")
                raise ValueError(f"Failed to load {yaml_file}: {e}") from e

            configs.append(config)
            logger.debug(f"Loaded {yaml_file.name}: {len(config.actions)} actions")

        merged = self._merge_configs(configs)
        logger.info(f"Loaded graph definition: {len(merged.actions)} total actions")
        return merged

    def _merge_configs(self, configs: List[GraphConfig]) -> GraphConfig:
        """
        Merge configs, keeping file order.

        Raises:
            ValueError: If two actions share a name
        """
        seen: Dict[str, ActionConfig] = {}
        for config in configs:
            for action in config.actions:
                if action.name in seen:
                    raise ValueError(f"Duplicate action name: {action.name}")
                seen[action.name] = action

        return GraphConfig(actions=list(seen.values()))


def build_graph(
    config: GraphConfig,
    registry: Optional[CallbackRegistry] = None
) -> Tuple[UpdateGraph, Dict[str, Action]]:
    """
    Build an UpdateGraph from a graph definition.

    Args:
        config: Graph definition
        registry: Resolves callback names; without one every action has no
                  callback, which is enough for planning and cycle checks

    Returns:
        The graph and its actions keyed by name

    Raises:
        ValueError: If a callback name is not registered
    """
    graph = UpdateGraph()
    actions: Dict[str, Action] = {}

    for action_config in config.actions:
        callback = None
        if registry is not None and action_config.callback is not None:
            callback = registry.get(action_config.callback)

        action = Action(
            callback=callback,
            emits=tuple(action_config.emits),
            name=action_config.name
        )
        graph.register(action, *action_config.triggers)
        actions[action_config.name] = action

    logger.info(f"Built update graph with {len(graph)} actions")
    return graph, actions
