"""
Interfaces for chain data sources.

The listener reads blocks, application logs and heights through these
interfaces so node clients can be swapped or faked.
"""
from abc import ABC, abstractmethod

from ..types import NeoApplicationLog, NeoBlock


class HeightSourceInterface(ABC):
    """Interface for node clients that feed the listener."""

    @abstractmethod
    def get_latest_height(self) -> int:
        """
        Get the current chain height.

        Returns:
            Latest height as reported by the node
        """
        pass

    @abstractmethod
    def get_block_by_index(self, height: int) -> NeoBlock:
        """
        Get a block with its transactions.

        Args:
            height: Block index

        Returns:
            Block data
        """
        pass

    @abstractmethod
    def get_application_log(self, txid: str) -> NeoApplicationLog:
        """
        Get the application log of a transaction.

        Args:
            txid: Transaction id as reported in the block

        Returns:
            Application log with executions and notifications
        """
        pass


class ExtendHeightInterface(ABC):
    """Interface for the secondary height endpoint."""

    @abstractmethod
    def get_latest_height(self) -> int:
        pass
