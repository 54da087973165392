import base64
import json
from typing import Optional

from yoiu.chains.base import Chain
from yoiu.config import INJECTIVE, TESTNET, DeployConfig, get_network_config
from yoiu.deploy import Deployer
from yoiu.tx import STATUS_ERROR, STATUS_OK, Event, TxRecord

CODE_ID = 42
CONTRACT_ADDRESS = "inj1contract0000000000000000000000000000000"
SENDER = "inj1sender00000000000000000000000000000000"


def make_record(status=STATUS_OK, events=None, tx_hash="ABC123") -> TxRecord:
    return TxRecord(hash=tx_hash, status=status, events=events or [])


def code_stored_event(code_id="42") -> Event:
    return Event(type="cosmwasm.wasm.v1.EventCodeStored", attributes=[
        ("checksum", '"abcdef"'),
        ("code_id", code_id),
        ("creator", f'"{SENDER}"'),
    ])


class FakeChain(Chain):
    """In-memory chain that answers like a node would and records every call."""

    def __init__(self, chain=INJECTIVE, gas_used=1000, fail_instantiate=False, query_response=None):
        super().__init__(get_network_config(chain, TESTNET))
        self.gas_used = gas_used
        self.fail_instantiate = fail_instantiate
        self.query_response = query_response or {}
        self.calls = []
        self.sent = {}
        self.queries = []
        self.stored_codes = []

    @property
    def address(self) -> str:
        return SENDER

    async def balance(self) -> int:
        return 12_345 * 10 ** 16

    def store_code_msg(self, wasm_bytes: bytes):
        return ("store_code", wasm_bytes)

    def instantiate_msg(self, code_id, init_msg, label, admin=None, funds=None):
        return ("instantiate", {"code_id": code_id, "msg": init_msg, "label": label, "admin": admin,
                                "funds": funds})

    def execute_msg(self, contract, msg, funds=None):
        return ("execute", {"contract": contract, "msg": msg, "funds": funds})

    async def simulate(self, msg) -> int:
        self.calls.append(("simulate", msg[0]))
        return self.gas_used

    async def broadcast(self, msg, gas_limit: int) -> str:
        tx_hash = f"TX{len(self.sent) + 1}"
        self.calls.append(("broadcast", msg[0], gas_limit))
        self.sent[tx_hash] = msg
        return tx_hash

    async def fetch_tx(self, tx_hash, poll_interval=2.0, timeout=60.0) -> TxRecord:
        kind, body = self.sent[tx_hash]
        if kind == "store_code":
            self.stored_codes.append(CODE_ID)
            return make_record(events=[code_stored_event(f'"{CODE_ID}"')], tx_hash=tx_hash)
        if kind == "instantiate":
            if self.fail_instantiate:
                record = make_record(status=STATUS_ERROR, tx_hash=tx_hash)
                record.raw_log = "out of gas"
                return record
            return make_record(events=[Event(type="cosmwasm.wasm.v1.EventContractInstantiated", attributes=[
                ("code_id", f'"{body["code_id"]}"'),
                ("contract_address", f'"{CONTRACT_ADDRESS}"'),
            ])], tx_hash=tx_hash)
        return make_record(events=[Event(type="wasm", attributes=[("_contract_address", body["contract"])])],
                           tx_hash=tx_hash)

    async def smart_query(self, contract: str, query_data: str) -> str:
        self.queries.append((contract, json.loads(base64.b64decode(query_data))))
        return base64.b64encode(json.dumps(self.query_response).encode()).decode()


def make_deployer(tmp_path, chain: Optional[FakeChain] = None, **kwargs) -> Deployer:
    wasm_path = tmp_path / "tier.wasm"
    wasm_path.write_bytes(b"\x00asm\x01\x00\x00\x00")
    config = DeployConfig(
        chain=INJECTIVE,
        mnemonic="test mnemonic words",
        wasm_path=wasm_path,
        poll_interval=0,
        confirm_timeout=0,
        **kwargs
    )
    return Deployer(chain or FakeChain(), config)
