from typing import List, Optional

from yoiu.contract import Contract

# seconds, one entry per tier
DEFAULT_LOCK_PERIODS = [864000, 1209600, 1209600, 1209600, 1209600]


def ido_init_msg(nft_contract: str, tier_contract: str, lock_periods: Optional[List[int]] = None) -> dict:
    return {
        "lock_periods": list(DEFAULT_LOCK_PERIODS if lock_periods is None else lock_periods),
        "nft_contract": nft_contract,
        "tier_contract": tier_contract,
    }


class IdoContract(Contract):
    name = "ido"

    async def query_config(self):
        return await self.query({"config": {}})

    async def change_admin(self, admin: str):
        return await self.execute({"change_admin": {"admin": admin}})

    async def change_status(self, status: str):
        return await self.execute({"change_status": {"status": status}})
