"""Block envelope schemas: Block, Header, Metadata and operation groups."""

from collections.abc import Iterator
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator, JsonValue, PlainSerializer, StrictBool, StrictInt, StrictStr

from tzblocks.services.schemas.common import NumericText, WireModel
from tzblocks.services.schemas.contents import BalanceUpdate, Contents


def _timestamp_text(value: object) -> object:
    # Nodes send RFC 3339 text; epoch numbers are not accepted.
    if not isinstance(value, (str, datetime)):
        raise ValueError("timestamp must be RFC 3339 text")
    return value


def _rfc3339(value: datetime) -> str:
    """Node form: ``Z`` for UTC, fraction only when non-zero and without padding."""
    text = value.isoformat()
    if value.microsecond:
        head, _, rest = text.partition(".")
        text = f"{head}.{rest[:6].rstrip('0')}{rest[6:]}"
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


Timestamp = Annotated[
    datetime,
    BeforeValidator(_timestamp_text),
    PlainSerializer(_rfc3339, return_type=str, when_used="json"),
]


class NonceHashState(str, Enum):
    """Shape of ``Metadata.nonce_hash`` as it came off the wire."""

    ABSENT = "absent"  # missing or null
    HASH = "hash"
    OPAQUE = "opaque"


class Header(WireModel):
    level: StrictInt
    proto: StrictInt
    predecessor: StrictStr
    timestamp: Timestamp
    validation_pass: StrictInt
    operations_hash: StrictStr
    fitness: list[StrictStr]
    context: StrictStr
    priority: StrictInt | None = None
    proof_of_work_nonce: StrictStr | None = None
    signature: StrictStr


class TestChainStatus(WireModel):
    status: StrictStr


class MaxOperationListLength(WireModel):
    max_size: StrictInt
    max_op: StrictInt | None = None


class Level(WireModel):
    """Cycle and voting-period coordinates of a block level."""

    level: StrictInt
    level_position: StrictInt
    cycle: StrictInt
    cycle_position: StrictInt
    voting_period: StrictInt
    voting_period_position: StrictInt
    expected_commitment: StrictBool


class Metadata(WireModel):
    protocol: StrictStr | None = None
    next_protocol: StrictStr | None = None
    test_chain_status: TestChainStatus | None = None
    max_operations_ttl: StrictInt | None = None
    max_operation_data_length: StrictInt | None = None
    max_block_header_length: StrictInt | None = None
    max_operation_list_length: list[MaxOperationListLength] | None = None
    baker: StrictStr | None = None
    level: Level | None = None
    voting_period_kind: StrictStr | None = None
    nonce_hash: JsonValue = None
    consumed_gas: NumericText | None = None
    deactivated: list[StrictStr] | None = None
    balance_updates: list[BalanceUpdate] | None = None

    @property
    def nonce_hash_state(self) -> NonceHashState:
        if self.nonce_hash is None:
            return NonceHashState.ABSENT
        if isinstance(self.nonce_hash, str):
            return NonceHashState.HASH
        return NonceHashState.OPAQUE


class OperationGroup(WireModel):
    """One signed operation: a branch, its contents and a signature."""

    protocol: StrictStr
    chain_id: StrictStr
    hash: StrictStr
    branch: StrictStr
    contents: list[Contents]
    signature: StrictStr | None = None


class Block(WireModel):
    """A block as returned by ``/chains/<chain>/blocks/<id>``.

    ``operations`` holds one list per validation pass, in node order.
    """

    protocol: StrictStr
    chain_id: StrictStr
    hash: StrictStr
    header: Header
    metadata: Metadata
    operations: list[list[OperationGroup]]

    @classmethod
    def from_wire(cls, raw: bytes | str) -> "Block":
        return cls.model_validate_json(raw)

    def iter_contents(self) -> Iterator[tuple[int, OperationGroup, Contents]]:
        """Yield (validation pass, group, contents) in block order."""
        for pass_index, groups in enumerate(self.operations):
            for group in groups:
                for contents in group.contents:
                    yield pass_index, group, contents
