# chainlisten/types/config.py

from msgspec import Struct


class NeoChainListenConfig(Struct, frozen=True):
    chain_id: int
    chain_name: str
    rest_url: str
    wrapper_contract: str
    proxy_contract: str
    extend_node_url: str = ""
    backward_block_number: int = 1
    listen_slot: int = 15
    rpc_timeout: int = 30
