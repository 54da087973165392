from abc import ABC, abstractmethod
from typing import Any, List, Optional

from yoiu.config import NetworkConfig
from yoiu.tx import TxRecord

# [{"amount": "1000", "denom": "inj"}]
Funds = List[dict]


class Chain(ABC):
    """Signing identity plus query/broadcast clients for one network.

    Messages returned by the builders are opaque SDK objects; the deployer only
    passes them back into `simulate` and `broadcast`.
    """

    def __init__(self, config: NetworkConfig):
        self.config = config

    @property
    @abstractmethod
    def address(self) -> str:
        ...

    @abstractmethod
    async def balance(self) -> int:
        """Fee denom balance of the signer, in base units."""

    @abstractmethod
    def store_code_msg(self, wasm_bytes: bytes) -> Any:
        ...

    @abstractmethod
    def instantiate_msg(self, code_id: int, init_msg: dict, label: str, admin: Optional[str] = None,
                        funds: Optional[Funds] = None) -> Any:
        ...

    @abstractmethod
    def execute_msg(self, contract: str, msg: dict, funds: Optional[Funds] = None) -> Any:
        ...

    @abstractmethod
    async def simulate(self, msg) -> int:
        """Dry-run `msg`, returning the gas used."""

    @abstractmethod
    async def broadcast(self, msg, gas_limit: int) -> str:
        """Sign and submit `msg`, returning the tx hash."""

    @abstractmethod
    async def fetch_tx(self, tx_hash: str, poll_interval: float = 2.0, timeout: float = 60.0) -> TxRecord:
        """Wait for `tx_hash` to be confirmed and return its record."""

    @abstractmethod
    async def smart_query(self, contract: str, query_data: str) -> str:
        """Smart contract state query; request and response data are base64."""
