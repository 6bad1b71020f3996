# chainlisten/cli/context.py

"""
CLI Context

Holds the listener shared by CLI commands and builds it on first use.
"""

import logging
from typing import Optional

from .. import create_listener
from ..core.logging import ChainListenLogger, log_with_context
from ..listen.neo_listen import NeoChainListen


class CLIContext:
    def __init__(self, config_path: Optional[str] = None):
        self.logger = ChainListenLogger.get_logger('cli.context')
        self.config_path = config_path
        self._listener: Optional[NeoChainListen] = None

    @property
    def listener(self) -> NeoChainListen:
        if self._listener is None:
            log_with_context(self.logger, logging.DEBUG, "Creating listener")
            self._listener = create_listener(config_path=self.config_path)
        return self._listener
