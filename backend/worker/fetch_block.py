"""Worker: fetch one block (or its operation hashes) and print it as JSON.

Usage:
    python -m worker.fetch_block
    python -m worker.fetch_block --block 700000
    python -m worker.fetch_block --block BLockGenesisGenesisGenesisGenesisGenesisf79b5d1CoW2 --operation-hashes
"""

import argparse
import sys

import structlog

from config import get_settings
from tzblocks.services._helpers import dump_json
from tzblocks.services.chain_client import ChainClient
from tzblocks.services.errors import ChainClientError
from tzblocks.services.identifiers import BlockId

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_block_id(raw: str) -> BlockId | None:
    """``head`` -> None, digits -> level, anything else -> hash."""
    value: str = raw.strip()
    if not value:
        raise argparse.ArgumentTypeError("Block must be 'head', a level or a block hash")
    if value == "head":
        return None
    if value.isdigit():
        return int(value)
    return value


def main(argv: list[str] | None = None) -> None:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Fetch a block from a Tezos node",
    )
    parser.add_argument(
        "--block",
        "-b",
        default="head",
        type=parse_block_id,
        help="'head' (default), a block level or a block hash",
    )
    parser.add_argument(
        "--operation-hashes",
        action="store_true",
        default=False,
        help="Print the block's operation hashes instead of the block",
    )
    parser.add_argument("--rpc-url", default=None, help="Node RPC root (default: CHAIN_RPC_URL)")
    args: argparse.Namespace = parser.parse_args(argv)

    if args.operation_hashes and not isinstance(args.block, str):
        parser.error("--operation-hashes needs --block set to a block hash")

    client: ChainClient = ChainClient.from_settings(rpc_url=args.rpc_url)
    logger.info(
        "Fetching block",
        block=args.block if args.block is not None else "head",
        rpc=args.rpc_url or get_settings().chain.rpc_info_for_logging(),
    )

    try:
        if args.operation_hashes:
            output: str = dump_json(client.get_operation_hashes(args.block), indent=2)
        elif args.block is None:
            output = dump_json(client.get_head_block().to_wire(), indent=2)
        else:
            output = dump_json(client.get_block(args.block).to_wire(), indent=2)
    except ChainClientError as exc:
        logger.error("fetch_failed", error=str(exc), cause=repr(exc.__cause__))
        sys.exit(1)

    sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
