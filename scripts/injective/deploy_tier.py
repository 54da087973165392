import asyncio

from yoiu.address import injective, lookup
from yoiu.config import INJECTIVE, DeployConfig
from yoiu.contracts.tier import TierContract, tier_init_msg
from yoiu.deploy import deployer_from_config

#------------------------
#   Run with: $ NETWORK=testnet MNEMONIC="..." python scripts/injective/deploy_tier.py
#------------------------

config = DeployConfig.from_env(INJECTIVE, contract_name="tier")


async def main():
    deployer = deployer_from_config(config)
    network = config.network
    print('Address: ', deployer.address)

    print('\nFetching balance........')
    print(f'Balance: {await deployer.balance()} inj')

    tier = TierContract(deployer)
    await tier.create(tier_init_msg(
        admin=deployer.address,
        validators=lookup(injective.validators, network),
        usdt_contract=lookup(injective.usdt, network),
        swap_router=lookup(injective.swap_router, network),
    ))
    print(deployer.get_address_dict())


asyncio.run(main())
