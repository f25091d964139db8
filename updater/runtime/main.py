"""
Update Plan - Main Entry Point

Loads a YAML graph definition and logs the execution plan for a set of
signals, or the cycles that make the plan impossible.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from updater.config.loader import ConfigLoader, build_graph

logger = logging.getLogger(__name__)


def resolve_log_level(name: str) -> Optional[int]:
    """Map a level name to its number, or None if logging does not know it"""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def main() -> int:
    """
    Main entry point for plan inspection.

    Environment Variables:
        UPDATER_CONFIG: YAML file or directory (default: "config")
        UPDATER_SIGNALS: Comma-separated incoming signals (default: none)
        UPDATER_LOG_LEVEL: Logging level (default: "INFO")

    Returns:
        Process exit status (1 if the definition is invalid or the
        affected actions form a cycle)
    """
    level_name = os.getenv("UPDATER_LOG_LEVEL", "INFO")
    level = resolve_log_level(level_name)
    logging.basicConfig(
        level=level if level is not None else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if level is None:
        logger.warning(f"Unknown log level {level_name!r}, using INFO")

    config_path = Path(os.getenv("UPDATER_CONFIG", "config"))
    signals = [s.strip() for s in os.getenv("UPDATER_SIGNALS", "").split(",") if s.strip()]

    logger.info(f"Config: {config_path}")
    logger.info(f"Signals: {signals}")

    try:
        config = ConfigLoader(config_path).load()
        graph, _ = build_graph(config)
        order = graph.plan(*signals)
    except ValueError as e:
        logger.error(f"Cannot plan update: {e}")
        return 1

    if not order:
        logger.info("No actions affected")
        return 0

    for step, action in enumerate(order, start=1):
        logger.info(f"{step:>3}. {action.label}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
