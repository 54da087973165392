import os
import pathlib
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from yoiu.errors import ConfigError, MissingMnemonicError

MAINNET = "mainnet"
TESTNET = "testnet"

INJECTIVE = "injective"
ORAICHAIN = "oraichain"

ROOT_DIR = pathlib.Path(__file__).parent.parent.parent.resolve()
ARTIFACTS_DIR = ROOT_DIR / "artifacts"

DEFAULT_LABEL = "Yoiu Contract"

# (event type, attribute key)
EventSelector = Tuple[str, str]


@dataclass(frozen=True)
class NetworkConfig:
    chain: str
    network: str
    chain_id: str
    fee_denom: str
    gas_price: float
    decimals: int
    prefix: str
    code_stored: EventSelector
    contract_instantiated: EventSelector
    explorer_url: Optional[str] = None
    # node endpoint for SDKs that take one; pyinjective resolves its own
    url: Optional[str] = None


def resolve_network(name: Optional[str]) -> str:
    return MAINNET if name == MAINNET else TESTNET


def injective_explorer_url(network: str) -> str:
    if network == MAINNET:
        return "https://sentry.exchange.grpc-web.injective.network"
    return f"https://{network}.sentry.exchange.grpc-web.injective.network"


def get_injective_config(network: str) -> NetworkConfig:
    network = resolve_network(network)
    return NetworkConfig(
        chain=INJECTIVE,
        network=network,
        chain_id="injective-1" if network == MAINNET else "injective-888",
        fee_denom="inj",
        gas_price=160_000_000,
        decimals=18,
        prefix="inj",
        code_stored=("cosmwasm.wasm.v1.EventCodeStored", "code_id"),
        contract_instantiated=("cosmwasm.wasm.v1.EventContractInstantiated", "contract_address"),
        explorer_url=injective_explorer_url(network),
    )


def get_oraichain_config(network: str) -> NetworkConfig:
    network = resolve_network(network)
    return NetworkConfig(
        chain=ORAICHAIN,
        network=network,
        chain_id="Oraichain" if network == MAINNET else "Oraichain-testnet",
        url="grpc+https://grpc.orai.io:443" if network == MAINNET
            else "grpc+https://testnet-grpc.orai.io:443",
        fee_denom="orai",
        gas_price=0.0025,
        decimals=6,
        prefix="orai",
        code_stored=("store_code", "code_id"),
        contract_instantiated=("instantiate", "_contract_address"),
    )


_CONFIGS = {
    INJECTIVE: get_injective_config,
    ORAICHAIN: get_oraichain_config,
}


def get_network_config(chain: str, network: str) -> NetworkConfig:
    try:
        return _CONFIGS[chain](network)
    except KeyError:
        raise ConfigError(f"unknown chain {chain!r}, expected one of {sorted(_CONFIGS)}")


@dataclass
class DeployConfig:
    """Everything a deploy or interaction script needs, resolved up front.

    Library code only ever sees this object; reading the process environment
    happens once, in `from_env`, at the entry point.
    """
    chain: str
    mnemonic: str
    network: str = TESTNET
    wasm_path: Optional[pathlib.Path] = None
    label: str = DEFAULT_LABEL
    admin: Optional[str] = None
    confirm_timeout: float = 60.0
    poll_interval: float = 2.0
    network_config: NetworkConfig = field(init=False)

    def __post_init__(self):
        if not self.mnemonic:
            raise MissingMnemonicError()
        self.network = resolve_network(self.network)
        self.network_config = get_network_config(self.chain, self.network)
        if self.wasm_path is not None:
            self.wasm_path = pathlib.Path(self.wasm_path)

    @classmethod
    def from_env(cls, chain: str, contract_name: Optional[str] = None, **kwargs) -> "DeployConfig":
        load_dotenv()
        if contract_name is not None and "wasm_path" not in kwargs:
            kwargs["wasm_path"] = ARTIFACTS_DIR / f"{contract_name}.wasm"
        return cls(
            chain=chain,
            mnemonic=os.environ.get("MNEMONIC", ""),
            network=os.environ.get("NETWORK", TESTNET),
            **kwargs
        )
