import asyncio
import base64
import json

import pytest

from yoiu.chains.injective import InjectiveChain, to_coins
from yoiu.config import TESTNET, get_injective_config
from yoiu.errors import TxFailedError
from yoiu.gas import compute_fee
from tests.helpers import SENDER

CONTRACT = "inj1qe3lwunhcjgwupvckf6mkxllv9a76xkl0jqfyj"


class FakeTransaction:
    """Records the builder calls a broadcast makes."""

    def __init__(self):
        self.gas = None
        self.fee = None
        self.memo = None
        self.timeout_height = None

    def with_gas(self, gas):
        self.gas = gas
        return self

    def with_fee(self, fee):
        self.fee = fee
        return self

    def with_memo(self, memo):
        self.memo = memo
        return self

    def with_timeout_height(self, height):
        self.timeout_height = height
        return self


class FakeClient:
    timeout_height = 777

    def __init__(self, tx_response=None, query_data=""):
        self.tx_response = tx_response or {"txhash": "0xabc", "code": 0}
        self.query_data = query_data
        self.broadcasts = []
        self.queries = []

    async def broadcast_tx_sync_mode(self, tx_raw_bytes):
        self.broadcasts.append(tx_raw_bytes)
        return {"txResponse": self.tx_response}

    async def simulate(self, tx_raw_bytes):
        return {"gasInfo": {"gasWanted": "0", "gasUsed": "104512"}}

    async def fetch_smart_contract_state(self, address, query_data):
        self.queries.append((address, query_data))
        return {"data": self.query_data}


@pytest.fixture
def built():
    return FakeTransaction()


def make_chain(built, client):
    # skip key derivation and node connections
    chain = object.__new__(InjectiveChain)
    chain.config = get_injective_config(TESTNET)
    chain._address = SENDER
    chain.client = client

    async def build_tx(msg):
        return built

    chain._build_tx = build_tx
    chain._sign = lambda tx: b"signed"
    return chain


def test_broadcast_pays_fee_for_gas_limit(built):
    client = FakeClient()
    chain = make_chain(built, client)

    tx_hash = asyncio.run(chain.broadcast("msg", 1300))

    assert tx_hash == "0xabc"
    assert client.broadcasts == [b"signed"]
    assert built.gas == 1300
    assert len(built.fee) == 1
    assert built.fee[0].amount == str(compute_fee(1300, 160_000_000)) == "208000000000"
    assert built.fee[0].denom == "inj"
    assert built.timeout_height == 777


def test_broadcast_rejected_by_check_tx(built):
    client = FakeClient(tx_response={"txhash": "0xdead", "code": 5, "rawLog": "insufficient funds"})
    chain = make_chain(built, client)

    with pytest.raises(TxFailedError) as error:
        asyncio.run(chain.broadcast("msg", 1300))
    assert error.value.tx_hash == "0xdead"
    assert error.value.raw_log == "insufficient funds"


def test_simulate_reads_gas_used(built):
    chain = make_chain(built, FakeClient())
    assert asyncio.run(chain.simulate("msg")) == 104512


def test_smart_query_sends_raw_json(built):
    answer = base64.b64encode(b'{"tier":4}').decode()
    client = FakeClient(query_data=answer)
    chain = make_chain(built, client)
    query = base64.b64encode(json.dumps({"user_info": {"address": SENDER}}).encode()).decode()

    result = asyncio.run(chain.smart_query(CONTRACT, query))

    assert result == answer
    assert client.queries == [(CONTRACT, '{"user_info": {"address": "%s"}}' % SENDER)]


def test_to_coins():
    coins = to_coins([{"amount": 10 ** 18, "denom": "inj"}, {"amount": "5", "denom": "peggy0xusdt"}])
    assert [(c.amount, c.denom) for c in coins] == [("1000000000000000000", "inj"), ("5", "peggy0xusdt")]
    assert to_coins(None) == []


def test_transactions_carry_configured_chain_id():
    class AccountClient:
        async def fetch_account(self, address):
            return {}

        def get_sequence(self):
            return 3

        def get_number(self):
            return 12

    chain = object.__new__(InjectiveChain)
    chain.config = get_injective_config(TESTNET)
    chain._address = SENDER
    chain.client = AccountClient()

    tx = asyncio.run(chain._build_tx(chain.execute_msg(CONTRACT, {"withdraw": {}})))

    assert tx.chain_id == "injective-888"
    assert tx.sequence == 3
    assert tx.account_num == 12
