"""Tests for worker.fetch_block."""

import argparse
from urllib.error import URLError

import pytest

from conftest import StubTransport
from tzblocks.services.chain_client import ChainClient
from worker import fetch_block
from worker.fetch_block import main, parse_block_id

BLOCK_HASH = "BLn3yUDUNq3BuPgn9ZFhx1nY7S5aGpjrZDZN1TJoc3MSsTTDsnQ"


def _use_transport(monkeypatch: pytest.MonkeyPatch, transport: StubTransport) -> None:
    client: ChainClient = ChainClient(transport)
    monkeypatch.setattr(
        fetch_block.ChainClient,
        "from_settings",
        lambda rpc_url=None, timeout=None: client,
    )


class TestParseBlockId:
    def test_head(self) -> None:
        assert parse_block_id("head") is None

    def test_level(self) -> None:
        assert parse_block_id("700000") == 700000

    def test_hash(self) -> None:
        assert parse_block_id(f" {BLOCK_HASH} ") == BLOCK_HASH

    def test_empty(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_block_id("  ")


class TestMain:
    def test_head_block(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], block_transport: StubTransport
    ) -> None:
        _use_transport(monkeypatch, block_transport)

        main([])

        assert block_transport.paths == ["/chains/main/blocks/head"]
        assert '"level": 700000' in capsys.readouterr().out

    def test_block_by_level(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], block_transport: StubTransport
    ) -> None:
        _use_transport(monkeypatch, block_transport)

        main(["--block", "700000"])

        assert block_transport.paths == ["/chains/main/blocks/700000"]
        assert '"kind": "transaction"' in capsys.readouterr().out

    def test_operation_hashes(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        transport = StubTransport(body=b'["op1","op2"]')
        _use_transport(monkeypatch, transport)

        main(["-b", BLOCK_HASH, "--operation-hashes"])

        assert transport.paths == [f"/chains/main/blocks/{BLOCK_HASH}/operation_hashes"]
        assert '"op1",\n  "op2"' in capsys.readouterr().out

    def test_operation_hashes_need_hash(self, monkeypatch: pytest.MonkeyPatch) -> None:
        transport = StubTransport(body=b"[]")
        _use_transport(monkeypatch, transport)

        with pytest.raises(SystemExit) as exc_info:
            main(["--block", "700000", "--operation-hashes"])

        assert exc_info.value.code == 2
        assert transport.paths == []

    def test_failure_exits_nonzero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _use_transport(monkeypatch, StubTransport(error=URLError("connection refused")))

        with pytest.raises(SystemExit) as exc_info:
            main(["--block", "1"])

        assert exc_info.value.code == 1
