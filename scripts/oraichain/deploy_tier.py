import asyncio

from yoiu.address import lookup, oraichain
from yoiu.config import ORAICHAIN, DeployConfig
from yoiu.contracts.tier import TierContract, tier_init_msg
from yoiu.deploy import deployer_from_config

config = DeployConfig.from_env(ORAICHAIN, contract_name="tier", label="Instantiate Contract")


async def main():
    deployer = deployer_from_config(config)
    print(f'Wallet address: {deployer.address}')
    print(f'Balance: {await deployer.balance()} orai')

    tier = TierContract(deployer)
    await tier.create(tier_init_msg(
        admin=deployer.address,
        validators=lookup(oraichain.validators, config.network),
        usdt_contract=lookup(oraichain.usdt, config.network),
        swap_router=lookup(oraichain.swap_router, config.network),
    ))
    print(f'Contract instantiated at address: {tier.address}')


asyncio.run(main())
