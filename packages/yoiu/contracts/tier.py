from typing import List, Optional

from yoiu.contract import Contract
from yoiu.errors import ConfigError

DEFAULT_DEPOSITS = ["25000", "7500", "1500", "250"]


def split_weights(count: int) -> List[str]:
    # the contract rejects weights that do not total exactly 100
    base, rest = divmod(100, count)
    return [str(base + rest)] + [str(base)] * (count - 1)


def tier_init_msg(admin: str, validators: List[str], usdt_contract: str, swap_router: str,
                  deposits: Optional[List[str]] = None, weights: Optional[List[str]] = None) -> dict:
    """Instantiate payload for the tier contract.

    `deposits` are the USD thresholds per tier, highest tier first. Validator
    weights default to an even split that sums to 100, any remainder going to
    the first validator.
    """
    if not validators:
        raise ConfigError("tier needs at least one validator")
    if weights is None:
        weights = split_weights(len(validators))
    if len(weights) != len(validators):
        raise ConfigError(f"{len(validators)} validators but {len(weights)} weights")
    return {
        "validators": [
            {"address": address, "weight": str(weight)}
            for address, weight in zip(validators, weights)
        ],
        "oraiswap_contract": {
            "usdt_contract": usdt_contract,
            "orai_swap_router_contract": swap_router,
        },
        "deposits": list(DEFAULT_DEPOSITS if deposits is None else deposits),
        "admin": admin,
    }


class TierContract(Contract):
    name = "tier"

    async def query_config(self):
        return await self.query({"config": {}})

    async def query_user_info(self, address: Optional[str] = None):
        return await self.query({"user_info": {"address": address or self.deployer.address}})

    async def query_user_total_delegated(self, address: Optional[str] = None):
        return await self.query({"user_total_delegated": {"address": address or self.deployer.address}})

    async def query_withdrawals(self, address: Optional[str] = None, start: Optional[int] = None,
                                limit: Optional[int] = None):
        return await self.query({"withdrawals": {
            "address": address or self.deployer.address,
            "start": start,
            "limit": limit,
        }})

    async def query_unbonds(self):
        return await self.query({"unbonds": {}})

    async def deposit(self, amount, denom: Optional[str] = None):
        denom = denom or self.deployer.chain.config.fee_denom
        return await self.execute({"deposit": {}}, funds=[{"amount": str(amount), "denom": denom}])

    async def withdraw(self):
        return await self.execute({"withdraw": {}})

    async def claim(self, recipient: Optional[str] = None, start: Optional[int] = None,
                    limit: Optional[int] = None):
        return await self.execute({"claim": {"recipient": recipient, "start": start, "limit": limit}})

    async def change_admin(self, admin: str):
        return await self.execute({"change_admin": {"admin": admin}})

    async def change_status(self, status: str):
        return await self.execute({"change_status": {"status": status}})
