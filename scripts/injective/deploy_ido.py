import asyncio

from yoiu.address import injective, lookup
from yoiu.config import INJECTIVE, DeployConfig
from yoiu.contracts.ido import IdoContract, ido_init_msg
from yoiu.deploy import deployer_from_config

config = DeployConfig.from_env(INJECTIVE, contract_name="ido")


async def main():
    deployer = deployer_from_config(config)
    print('Address: ', deployer.address)

    print('\nFetching balance........')
    print(f'Balance: {await deployer.balance()} inj')

    ido = IdoContract(deployer)
    await ido.create(ido_init_msg(
        nft_contract=lookup(injective.nft, config.network),
        tier_contract=lookup(injective.tier, config.network),
    ))
    print(deployer.get_address_dict())


asyncio.run(main())
