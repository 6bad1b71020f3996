"""
Shared fixtures for chain listener tests.
"""
import pytest

from chainlisten.listen.neo_listen import NeoChainListen
from chainlisten.types import NeoChainListenConfig
from tests.helpers import (
    NEO_CHAIN_ID,
    PROXY_CONTRACT,
    WRAPPER_CONTRACT,
    FakeExtendHeight,
    FakeHeightSource,
)


@pytest.fixture
def listen_config():
    return NeoChainListenConfig(
        chain_id=NEO_CHAIN_ID,
        chain_name="neo",
        rest_url="http://localhost:10332",
        extend_node_url="http://localhost:8080/height",
        wrapper_contract=WRAPPER_CONTRACT,
        proxy_contract=PROXY_CONTRACT,
        backward_block_number=3,
        listen_slot=15,
    )


@pytest.fixture
def height_source():
    return FakeHeightSource()


@pytest.fixture
def listener(listen_config, height_source):
    return NeoChainListen(listen_config, sdk=height_source, extend_client=FakeExtendHeight())
