import json
import base64
from typing import Optional

from pyinjective.async_client import AsyncClient
from pyinjective.core.network import Network
from pyinjective.transaction import Transaction
from pyinjective.wallet import PrivateKey
from pyinjective.proto.cosmos.base.v1beta1 import coin_pb2 as base_coin_pb
from pyinjective.proto.cosmwasm.wasm.v1 import tx_pb2 as wasm_tx_pb

from yoiu.chains.base import Chain, Funds
from yoiu.config import MAINNET, NetworkConfig
from yoiu.errors import TxFailedError
from yoiu.gas import compute_fee
from yoiu.tx import TxRecord, wait_for_tx


def to_coins(funds: Optional[Funds]):
    return [base_coin_pb.Coin(amount=str(f["amount"]), denom=f["denom"]) for f in funds or []]


class InjectiveChain(Chain):

    def __init__(self, config: NetworkConfig, mnemonic: str):
        super().__init__(config)
        self.network = Network.mainnet() if config.network == MAINNET else Network.testnet()
        self.client = AsyncClient(self.network)
        self.private_key = PrivateKey.from_mnemonic(mnemonic)
        self.public_key = self.private_key.to_public_key()
        self._address = self.public_key.to_address().to_acc_bech32()

    @property
    def address(self) -> str:
        return self._address

    async def balance(self) -> int:
        result = await self.client.fetch_bank_balance(address=self.address, denom=self.config.fee_denom)
        return int(result["balance"]["amount"])

    def store_code_msg(self, wasm_bytes: bytes):
        return wasm_tx_pb.MsgStoreCode(sender=self.address, wasm_byte_code=wasm_bytes)

    def instantiate_msg(self, code_id: int, init_msg: dict, label: str, admin: Optional[str] = None,
                        funds: Optional[Funds] = None):
        return wasm_tx_pb.MsgInstantiateContract(
            sender=self.address,
            admin=admin or "",
            code_id=int(code_id),
            label=label,
            msg=bytes(json.dumps(init_msg), 'utf-8'),
            funds=to_coins(funds),
        )

    def execute_msg(self, contract: str, msg: dict, funds: Optional[Funds] = None):
        return wasm_tx_pb.MsgExecuteContract(
            sender=self.address,
            contract=contract,
            msg=bytes(json.dumps(msg), 'utf-8'),
            funds=to_coins(funds),
        )

    async def _build_tx(self, msg) -> Transaction:
        await self.client.fetch_account(self.address)
        return (
            Transaction()
            .with_messages(msg)
            .with_sequence(self.client.get_sequence())
            .with_account_num(self.client.get_number())
            .with_chain_id(self.config.chain_id)
        )

    def _sign(self, tx: Transaction) -> bytes:
        sign_doc = tx.get_sign_doc(self.public_key)
        sig = self.private_key.sign(sign_doc.SerializeToString())
        return tx.get_tx_data(sig, self.public_key)

    async def simulate(self, msg) -> int:
        tx = await self._build_tx(msg)
        result = await self.client.simulate(self._sign(tx))
        return int(result["gasInfo"]["gasUsed"])

    async def broadcast(self, msg, gas_limit: int) -> str:
        tx = await self._build_tx(msg)
        fee = [base_coin_pb.Coin(
            amount=str(compute_fee(gas_limit, self.config.gas_price)),
            denom=self.config.fee_denom,
        )]
        tx = tx.with_gas(gas_limit).with_fee(fee).with_memo("").with_timeout_height(self.client.timeout_height)
        result = await self.client.broadcast_tx_sync_mode(self._sign(tx))
        response = result["txResponse"]
        if int(response.get("code", 0)) != 0:
            raise TxFailedError(response["txhash"], response.get("rawLog", ""))
        return response["txhash"]

    async def fetch_tx(self, tx_hash: str, poll_interval: float = 2.0, timeout: float = 60.0) -> TxRecord:
        return await wait_for_tx(tx_hash, self.config.explorer_url, poll_interval=poll_interval, timeout=timeout)

    async def smart_query(self, contract: str, query_data: str) -> str:
        # the node takes the raw JSON query bytes and answers with base64
        query = base64.b64decode(query_data).decode()
        result = await self.client.fetch_smart_contract_state(address=contract, query_data=query)
        return result["data"]
