import math
from decimal import Decimal

GAS_MULTIPLIER = 1.3


def compute_gas(gas_used) -> int:
    # simulated usage plus margin; can still run out on-chain
    return math.ceil(int(gas_used) * GAS_MULTIPLIER)


def compute_fee(gas_limit: int, gas_price) -> int:
    return math.ceil(Decimal(str(gas_price)) * gas_limit)
