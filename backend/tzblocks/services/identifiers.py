"""Block identifier resolution: level or hash to an RPC path segment."""

from tzblocks.services.errors import InvalidIdentifierError

BlockId = int | str


def block_id_to_path(block_id: BlockId) -> str:
    """Return the path segment for a block level (int) or block hash (str).

    No coercion: bools, floats, None and everything else are rejected.
    """
    # bool is an int subclass
    if isinstance(block_id, bool):
        raise InvalidIdentifierError(
            f"id must be block level (int) or block hash (str), got bool {block_id!r}"
        )
    if isinstance(block_id, int):
        return str(block_id)
    if isinstance(block_id, str):
        return block_id
    raise InvalidIdentifierError(
        "id must be block level (int) or block hash (str), "
        f"got {type(block_id).__name__} {block_id!r}"
    )
