import base64
import json
import pathlib


def to_base64(msg) -> str:
    return base64.b64encode(bytes(json.dumps(msg), 'ascii')).decode()


def from_base64(data):
    if isinstance(data, str):
        data = data.encode('ascii')
    return json.loads(base64.b64decode(data))


def read_wasm(path) -> bytes:
    return pathlib.Path(path).read_bytes()
