import asyncio
import base64
import json
from datetime import timedelta
from typing import Optional

from cosmpy.aerial.client import LedgerClient
from cosmpy.aerial.client import NetworkConfig as LedgerNetworkConfig
from cosmpy.aerial.client.utils import prepare_and_broadcast_basic_transaction
from cosmpy.aerial.exceptions import QueryTimeoutError
from cosmpy.aerial.tx import SigningCfg, Transaction
from cosmpy.aerial.wallet import LocalWallet
from cosmpy.protos.cosmos.base.v1beta1.coin_pb2 import Coin
from cosmpy.protos.cosmwasm.wasm.v1.query_pb2 import QuerySmartContractStateRequest
from cosmpy.protos.cosmwasm.wasm.v1.tx_pb2 import MsgExecuteContract, MsgInstantiateContract, MsgStoreCode

from yoiu.chains.base import Chain, Funds
from yoiu.config import NetworkConfig
from yoiu.errors import TxNotFoundError
from yoiu.tx import TxRecord


def to_coins(funds: Optional[Funds]):
    return [Coin(amount=str(f["amount"]), denom=f["denom"]) for f in funds or []]


class OraichainChain(Chain):

    def __init__(self, config: NetworkConfig, mnemonic: str):
        super().__init__(config)
        self.client = LedgerClient(LedgerNetworkConfig(
            chain_id=config.chain_id,
            url=config.url,
            fee_minimum_gas_price=config.gas_price,
            fee_denomination=config.fee_denom,
            staking_denomination=config.fee_denom,
        ))
        self.wallet = LocalWallet.from_mnemonic(mnemonic, prefix=config.prefix)

    @property
    def address(self) -> str:
        return str(self.wallet.address())

    async def balance(self) -> int:
        return int(self.client.query_bank_balance(self.wallet.address(), denom=self.config.fee_denom))

    def store_code_msg(self, wasm_bytes: bytes):
        return MsgStoreCode(sender=self.address, wasm_byte_code=wasm_bytes)

    def instantiate_msg(self, code_id: int, init_msg: dict, label: str, admin: Optional[str] = None,
                        funds: Optional[Funds] = None):
        return MsgInstantiateContract(
            sender=self.address,
            admin=admin or "",
            code_id=int(code_id),
            label=label,
            msg=bytes(json.dumps(init_msg), 'utf-8'),
            funds=to_coins(funds),
        )

    def execute_msg(self, contract: str, msg: dict, funds: Optional[Funds] = None):
        return MsgExecuteContract(
            sender=self.address,
            contract=contract,
            msg=bytes(json.dumps(msg), 'utf-8'),
            funds=to_coins(funds),
        )

    async def simulate(self, msg) -> int:
        account = self.client.query_account(self.wallet.address())
        tx = Transaction()
        tx.add_message(msg)
        tx.seal(SigningCfg.direct(self.wallet.public_key(), account.sequence), fee="", gas_limit=0)
        tx.sign(self.wallet.signer(), self.config.chain_id, account.number)
        tx.complete()
        return int(self.client.simulate_tx(tx))

    async def broadcast(self, msg, gas_limit: int) -> str:
        tx = Transaction()
        tx.add_message(msg)
        submitted = prepare_and_broadcast_basic_transaction(self.client, tx, self.wallet, gas_limit=gas_limit)
        return submitted.tx_hash

    async def fetch_tx(self, tx_hash: str, poll_interval: float = 2.0, timeout: float = 60.0) -> TxRecord:
        try:
            response = await asyncio.to_thread(
                self.client.wait_for_query_tx,
                tx_hash,
                timeout=timedelta(seconds=timeout),
                poll_period=timedelta(seconds=poll_interval),
            )
        except QueryTimeoutError:
            raise TxNotFoundError(tx_hash, timeout)
        return TxRecord.from_tx_response(response)

    async def smart_query(self, contract: str, query_data: str) -> str:
        request = QuerySmartContractStateRequest(address=contract, query_data=base64.b64decode(query_data))
        response = self.client.wasm.SmartContractState(request)
        return base64.b64encode(response.data).decode()
