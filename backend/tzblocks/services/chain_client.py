"""Chain RPC client for fetching and decoding block data."""

from typing import Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from config import get_settings
from tzblocks.services.errors import DecodeError, InvalidIdentifierError, TransportError
from tzblocks.services.identifiers import BlockId, block_id_to_path
from tzblocks.services.schemas.block import Block
from tzblocks.services.transport import HttpTransport, Transport

logger = structlog.get_logger(__name__)

# Nodes answer with one list per validation pass; a flat list is accepted as-is.
_OPERATION_HASHES = TypeAdapter(list[str] | list[list[str]])


class ChainClient:
    """Fetch-and-decode access to a Tezos node's block RPCs.

    Holds no state besides its transport and chain alias, so one instance can
    be shared between callers as long as the transport allows it.
    """

    def __init__(self, transport: Transport, chain: str = "main"):
        self.transport = transport
        self.chain = chain

    @classmethod
    def from_settings(
        cls,
        rpc_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> "ChainClient":
        settings = get_settings()
        transport = HttpTransport(
            rpc_url or settings.chain.rpc_url,
            timeout=timeout or settings.chain.rpc_timeout,
        )
        return cls(transport, chain=settings.chain.chain)

    def _blocks_path(self, segment: str) -> str:
        return f"/chains/{self.chain}/blocks/{segment}"

    def _get(self, path: str, context: str) -> bytes:
        logger.debug("RPC request", path=path)
        try:
            return self.transport.get(path)
        except Exception as e:
            logger.warning("RPC request failed", path=path, error=str(e)[:100])
            raise TransportError(context) from e

    def _decode_block(self, raw: bytes, path: str, context: str) -> Block:
        try:
            return Block.from_wire(raw)
        except ValidationError as e:
            logger.warning("Block decode failed", path=path, errors=e.error_count())
            raise DecodeError(context) from e

    def get_head_block(self) -> Block:
        path = self._blocks_path("head")
        raw = self._get(path, "could not get head block")
        return self._decode_block(raw, path, "could not decode head block")

    def get_block(self, block_id: BlockId) -> Block:
        """Fetch a block by level (int) or hash (str)."""
        try:
            segment = block_id_to_path(block_id)
        except InvalidIdentifierError as e:
            raise InvalidIdentifierError(f"could not get block {block_id!r}") from e

        path = self._blocks_path(segment)
        raw = self._get(path, f"could not get block '{segment}'")
        return self._decode_block(raw, path, f"could not decode block '{segment}'")

    def get_operation_hashes(self, block_hash: str) -> list[str]:
        """Operation hashes of a block, in validation-pass then in-pass order."""
        if not isinstance(block_hash, str):
            raise InvalidIdentifierError(
                f"block hash must be a str, got {type(block_hash).__name__}"
            )

        path = self._blocks_path(f"{block_hash}/operation_hashes")
        raw = self._get(path, "could not get operation hashes")
        try:
            decoded = _OPERATION_HASHES.validate_json(raw)
        except ValidationError as e:
            logger.warning("Operation hashes decode failed", path=path, errors=e.error_count())
            raise DecodeError("could not decode operation hashes") from e

        hashes: list[str] = []
        for entry in decoded:
            if isinstance(entry, list):
                hashes.extend(entry)
            else:
                hashes.append(entry)
        return hashes
