class YoiuError(Exception):
    pass


class ConfigError(YoiuError):
    pass


class MissingMnemonicError(ConfigError):
    def __init__(self):
        super().__init__("MNEMONIC is missing")


class ExtractionError(YoiuError):
    pass


class TxFailedError(YoiuError):
    def __init__(self, tx_hash: str, raw_log: str = ""):
        self.tx_hash = tx_hash
        self.raw_log = raw_log
        super().__init__(f"transaction {tx_hash} failed: {raw_log}")


class TxNotFoundError(YoiuError):
    def __init__(self, tx_hash: str, timeout: float):
        self.tx_hash = tx_hash
        super().__init__(f"transaction {tx_hash} not confirmed after {timeout}s")
