from yoiu.config import DeployConfig, NetworkConfig, get_network_config
from yoiu.deploy import Deployer, Deployment, deployer_from_config, get_deployer
from yoiu.errors import (
    ConfigError,
    ExtractionError,
    MissingMnemonicError,
    TxFailedError,
    TxNotFoundError,
    YoiuError,
)
from yoiu.gas import GAS_MULTIPLIER, compute_gas
from yoiu.tx import Event, KeyValue, TxRecord, get_key_value

__version__ = "0.1.0"
