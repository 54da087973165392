from yoiu.errors import ConfigError


def lookup(book: dict, network: str):
    try:
        return book[network]
    except KeyError:
        raise ConfigError(f"no address known for {network}")
