from typing import Optional

from yoiu.chains import Funds
from yoiu.deploy import Deployer
from yoiu.errors import ConfigError
from yoiu.tx import TxRecord


class Contract:
    name: Optional[str] = None

    def __init__(self, deployer: Deployer, address: Optional[str] = None):
        self.deployer = deployer
        self.address = address

    def _require_address(self) -> str:
        if not self.address:
            raise ConfigError(f"{type(self).__name__} has no contract address")
        return self.address

    async def create(self, init_msg: dict) -> str:
        deployment = await self.deployer.deploy(init_msg, name=self.name)
        self.address = deployment.contract_address
        return self.address

    async def query(self, msg: dict):
        try:
            return await self.deployer.query_contract(self._require_address(), msg)
        except Exception as error:
            print('Error querying contract:', error)
            raise

    async def execute(self, msg: dict, funds: Optional[Funds] = None) -> TxRecord:
        return await self.deployer.execute_contract(self._require_address(), msg, funds or [])
