from yoiu.chains.base import Chain, Funds
from yoiu.config import INJECTIVE, ORAICHAIN, NetworkConfig
from yoiu.errors import ConfigError


def get_chain(config: NetworkConfig, mnemonic: str) -> Chain:
    # SDK imports stay local so one chain's stack is enough to drive it
    if config.chain == INJECTIVE:
        from yoiu.chains.injective import InjectiveChain
        return InjectiveChain(config, mnemonic)
    if config.chain == ORAICHAIN:
        from yoiu.chains.oraichain import OraichainChain
        return OraichainChain(config, mnemonic)
    raise ConfigError(f"unsupported chain {config.chain!r}")
