# chainlisten/core/config.py

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import msgspec
from dotenv import load_dotenv

from ..types import NeoChainListenConfig
from ..utils.address import strip_hex_prefix
from .logging import ChainListenLogger, log_with_context


DEFAULT_CONFIG_PATH = Path("config") / "config.json"
ENV_PREFIX = "CHAINLISTEN_"

# environment variable suffix -> config key
ENV_OVERRIDES = {
    "CHAIN_ID": "chain_id",
    "CHAIN_NAME": "chain_name",
    "REST_URL": "rest_url",
    "EXTEND_NODE_URL": "extend_node_url",
    "WRAPPER_CONTRACT": "wrapper_contract",
    "PROXY_CONTRACT": "proxy_contract",
    "BACKWARD_BLOCK_NUMBER": "backward_block_number",
    "LISTEN_SLOT": "listen_slot",
    "RPC_TIMEOUT": "rpc_timeout",
}


def load_config(config_path: Optional[str] = None, env_vars: Optional[dict] = None) -> NeoChainListenConfig:
    """
    Load the listener configuration.

    The JSON file is read from `config_path`, then CHAINLISTEN_CONFIG, then
    config/config.json. CHAINLISTEN_* environment variables override file values.
    """
    logger = ChainListenLogger.get_logger('core.config')

    if env_vars is None:
        load_dotenv()
        env = os.environ
    else:
        env = env_vars

    path = Path(config_path or env.get(f"{ENV_PREFIX}CONFIG") or DEFAULT_CONFIG_PATH)
    config_dict = _read_config_file(path)
    config_dict.update(_env_overrides(env))

    for key in ("wrapper_contract", "proxy_contract"):
        if isinstance(config_dict.get(key), str):
            config_dict[key] = strip_hex_prefix(config_dict[key]).lower()

    try:
        # strict=False lets numeric settings arrive as strings from the environment
        config = msgspec.convert(config_dict, type=NeoChainListenConfig, strict=False)
    except msgspec.ValidationError as e:
        log_with_context(logger, logging.ERROR, "Invalid listener configuration", error=str(e))
        raise ValueError(f"Invalid listener configuration: {e}") from e

    log_with_context(logger, logging.INFO, "Listener configuration loaded",
                     chain_name=config.chain_name,
                     url=config.rest_url)
    return config


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ValueError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")
    return config_dict


def _env_overrides(env) -> Dict[str, str]:
    overrides = {}
    for suffix, key in ENV_OVERRIDES.items():
        value = env.get(f"{ENV_PREFIX}{suffix}")
        if value:
            overrides[key] = value
    return overrides
