# chainlisten/__init__.py

import os
from pathlib import Path
from typing import Optional

from .core.config import load_config
from .core.logging import ChainListenLogger
from .listen.neo_listen import NeoChainListen
from .types import BlockRecords, NeoChainListenConfig


def create_listener(config_path: Optional[str] = None, env_vars: Optional[dict] = None) -> NeoChainListen:
    env = env_vars if env_vars is not None else os.environ
    _configure_logging_early(env)

    logger = ChainListenLogger.get_logger('core.init')

    config = load_config(config_path, env_vars)
    listener = NeoChainListen(config)

    logger.info(f"Listener created for chain {config.chain_name} ({config.chain_id})")
    return listener


def _configure_logging_early(env) -> None:
    log_dir_env = env.get("CHAINLISTEN_LOG_DIR")
    if log_dir_env:
        log_dir = Path(log_dir_env)
    else:
        log_dir = Path.cwd() / "logs"

    log_level = env.get("CHAINLISTEN_LOG_LEVEL", "INFO")
    console_enabled = env.get("CHAINLISTEN_LOG_CONSOLE", "true").lower() == "true"
    file_enabled = env.get("CHAINLISTEN_LOG_FILE", "false").lower() == "true"
    structured_format = env.get("CHAINLISTEN_LOG_STRUCTURED", "true").lower() == "true"

    ChainListenLogger.configure(
        log_dir=log_dir,
        log_level=log_level,
        console_enabled=console_enabled,
        file_enabled=file_enabled,
        structured_format=structured_format
    )


__all__ = [
    "create_listener",
    "load_config",
    "NeoChainListen",
    "NeoChainListenConfig",
    "BlockRecords",
]
