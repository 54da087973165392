from dataclasses import dataclass
from typing import Dict, Optional

from yoiu.chains import Chain, Funds, get_chain
from yoiu.codec import from_base64, read_wasm, to_base64
from yoiu.config import TESTNET, DeployConfig
from yoiu.errors import ConfigError, ExtractionError, TxFailedError
from yoiu.gas import compute_gas
from yoiu.tx import TxRecord, get_key_value


@dataclass
class Deployment:
    code_id: int
    contract_address: str
    store_tx: str
    instantiate_tx: str


class Deployer:
    """Upload, instantiate and drive contracts on one chain.

    Every transaction goes simulate -> broadcast with margin -> confirmed record.
    Identifiers are only ever read from the confirmed record's events.
    """

    def __init__(self, chain: Chain, config: DeployConfig):
        self.chain = chain
        self.config = config
        self.address_book: Dict[str, str] = {}
        self.last_store_tx: Optional[str] = None
        self.last_instantiate_tx: Optional[str] = None

    @property
    def address(self) -> str:
        return self.chain.address

    async def balance(self) -> float:
        amount = await self.chain.balance()
        return round(amount / 10 ** self.chain.config.decimals, 2)

    async def send_msg(self, msg) -> TxRecord:
        print('\nSimulating transaction........')
        gas_used = await self.chain.simulate(msg)
        gas_limit = compute_gas(gas_used)

        print('Broadcasting transaction........')
        tx_hash = await self.chain.broadcast(msg, gas_limit)

        print('\nGetting transaction info........')
        record = await self.chain.fetch_tx(
            tx_hash,
            poll_interval=self.config.poll_interval,
            timeout=self.config.confirm_timeout,
        )
        if not record.ok:
            raise TxFailedError(tx_hash, record.raw_log)
        return record

    async def store_contract(self, wasm_path=None) -> int:
        wasm_path = wasm_path or self.config.wasm_path
        if wasm_path is None:
            raise ConfigError("no wasm artifact configured")
        msg = self.chain.store_code_msg(read_wasm(wasm_path))
        record = await self.send_msg(msg)
        self.last_store_tx = record.hash

        event_type, key = self.chain.config.code_stored
        code_id = get_key_value(record, event_type, key).unwrap()
        print('Code ID: ', code_id)
        try:
            return int(code_id)
        except ValueError:
            raise ExtractionError(f"code_id {code_id!r} in transaction {record.hash} is not a number")

    async def instantiate_contract(self, code_id: int, init_msg: dict, label: Optional[str] = None,
                                   admin: Optional[str] = None, funds: Optional[Funds] = None) -> str:
        msg = self.chain.instantiate_msg(
            code_id=code_id,
            init_msg=init_msg,
            label=label or self.config.label,
            admin=admin or self.config.admin or self.address,
            funds=funds,
        )
        record = await self.send_msg(msg)
        self.last_instantiate_tx = record.hash

        event_type, key = self.chain.config.contract_instantiated
        contract_address = get_key_value(record, event_type, key).unwrap()
        print('Contract Address:', contract_address)
        return contract_address

    async def deploy(self, init_msg: dict, name: Optional[str] = None) -> Deployment:
        # no rollback: a failed instantiate leaves the uploaded code on-chain
        code_id = await self.store_contract()
        contract_address = await self.instantiate_contract(code_id=code_id, init_msg=init_msg)
        if name:
            self.store_contract_addr(name, contract_address)
        return Deployment(
            code_id=code_id,
            contract_address=contract_address,
            store_tx=self.last_store_tx,
            instantiate_tx=self.last_instantiate_tx,
        )

    async def execute_contract(self, contract_addr: str, execute_msg: dict,
                               funds: Optional[Funds] = None) -> TxRecord:
        msg = self.chain.execute_msg(contract_addr, execute_msg, funds)
        return await self.send_msg(msg)

    async def query_contract(self, contract_addr: str, query: dict):
        data = await self.chain.smart_query(contract_addr, to_base64(query))
        return from_base64(data)

    def store_contract_addr(self, name: str, address: str):
        self.address_book[name] = address

    def get_address_dict(self) -> Dict[str, str]:
        return dict(self.address_book)


def deployer_from_config(config: DeployConfig) -> Deployer:
    chain = get_chain(config.network_config, config.mnemonic)
    return Deployer(chain, config)


def get_deployer(mnemonic: str, chain: str, network: str = TESTNET, **kwargs) -> Deployer:
    return deployer_from_config(DeployConfig(chain=chain, mnemonic=mnemonic, network=network, **kwargs))
