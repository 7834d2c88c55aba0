"""Shared fixtures — sample block payload and a scripted transport."""

import copy
import json
from pathlib import Path

import pytest

from tzblocks.services.chain_client import ChainClient

_DATA_DIR: Path = Path(__file__).resolve().parent / "data"
_SAMPLE_BLOCK: dict[str, object] = json.loads((_DATA_DIR / "block.json").read_text(encoding="utf-8"))


class StubTransport:
    """Returns ``body`` (or raises ``error``) and records every requested path."""

    def __init__(self, body: bytes = b"", error: Exception | None = None):
        self.body = body
        self.error = error
        self.paths: list[str] = []

    def get(self, path: str) -> bytes:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture()
def sample_block() -> dict[str, object]:
    return copy.deepcopy(_SAMPLE_BLOCK)


@pytest.fixture()
def sample_block_bytes(sample_block: dict[str, object]) -> bytes:
    return json.dumps(sample_block).encode("utf-8")


@pytest.fixture()
def block_transport(sample_block_bytes: bytes) -> StubTransport:
    return StubTransport(body=sample_block_bytes)


@pytest.fixture()
def client(block_transport: StubTransport) -> ChainClient:
    return ChainClient(block_transport)
