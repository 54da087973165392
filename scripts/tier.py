import asyncio

from yoiu.config import INJECTIVE, DeployConfig
from yoiu.contracts.tier import TierContract
from yoiu.deploy import deployer_from_config

CONTRACT_ADDRESS = "inj1qe3lwunhcjgwupvckf6mkxllv9a76xkl0jqfyj"

config = DeployConfig.from_env(INJECTIVE)


async def main():
    deployer = deployer_from_config(config)
    tier = TierContract(deployer, CONTRACT_ADDRESS)

    # response = await tier.deposit(1_000_000_000_000_000_000)

    response = await tier.query_user_info(deployer.address)
    print(response)


asyncio.run(main())
