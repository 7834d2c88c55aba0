"""Operation contents: one variant per operation kind, plus execution metadata."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import (
    Discriminator,
    Field,
    JsonValue,
    StrictBool,
    StrictInt,
    StrictStr,
    Tag,
    TypeAdapter,
)

from tzblocks.services.schemas.common import NumericText, WireModel


class OperationKind(str, Enum):
    """Value of the ``kind`` discriminator on a contents record."""

    ENDORSEMENT = "endorsement"
    ENDORSEMENT_WITH_SLOT = "endorsement_with_slot"
    PREENDORSEMENT = "preendorsement"
    SEED_NONCE_REVELATION = "seed_nonce_revelation"
    DOUBLE_ENDORSEMENT_EVIDENCE = "double_endorsement_evidence"
    DOUBLE_PREENDORSEMENT_EVIDENCE = "double_preendorsement_evidence"
    DOUBLE_BAKING_EVIDENCE = "double_baking_evidence"
    ACTIVATE_ACCOUNT = "activate_account"
    PROPOSALS = "proposals"
    BALLOT = "ballot"
    FAILING_NOOP = "failing_noop"
    REVEAL = "reveal"
    TRANSACTION = "transaction"
    ORIGINATION = "origination"
    DELEGATION = "delegation"
    REGISTER_GLOBAL_CONSTANT = "register_global_constant"
    SET_DEPOSITS_LIMIT = "set_deposits_limit"


# ── Ledger / results ──────────────────────────────────────────────────────────


class BalanceUpdate(WireModel):
    """One ledger delta. ``kind`` is contract, freezer, accumulator, ..."""

    kind: StrictStr
    change: NumericText
    contract: StrictStr | None = None
    delegate: StrictStr | None = None
    category: StrictStr | None = None
    cycle: StrictInt | None = None
    level: StrictInt | None = None


class OperationError(WireModel):
    kind: StrictStr
    id: StrictStr


class OperationResult(WireModel):
    status: StrictStr
    consumed_gas: NumericText | None = None
    errors: list[OperationError] | None = None


class ContentsMetadata(WireModel):
    balance_updates: list[BalanceUpdate] | None = None
    operation_result: OperationResult | None = None
    delegate: StrictStr | None = None
    slots: list[StrictInt] | None = None


# ── Variants ──────────────────────────────────────────────────────────────────


class _ContentsBase(WireModel):
    metadata: ContentsMetadata | None = None


class _ManagerOperation(_ContentsBase):
    """Fields shared by every fee-paying manager operation."""

    source: StrictStr
    fee: NumericText
    counter: NumericText
    gas_limit: NumericText
    storage_limit: NumericText


class Endorsement(_ContentsBase):
    kind: Literal["endorsement"]
    level: StrictInt
    # Tenderbake (Ithaca onwards)
    slot: StrictInt | None = None
    round: StrictInt | None = None
    block_payload_hash: StrictStr | None = None


class EndorsementWithSlot(_ContentsBase):
    kind: Literal["endorsement_with_slot"]
    endorsement: dict[str, JsonValue]
    slot: StrictInt


class Preendorsement(_ContentsBase):
    kind: Literal["preendorsement"]
    slot: StrictInt
    level: StrictInt
    round: StrictInt
    block_payload_hash: StrictStr


class SeedNonceRevelation(_ContentsBase):
    kind: Literal["seed_nonce_revelation"]
    level: StrictInt
    nonce: StrictStr


class DoubleEndorsementEvidence(_ContentsBase):
    kind: Literal["double_endorsement_evidence"]
    op1: dict[str, JsonValue]
    op2: dict[str, JsonValue]


class DoublePreendorsementEvidence(_ContentsBase):
    kind: Literal["double_preendorsement_evidence"]
    op1: dict[str, JsonValue]
    op2: dict[str, JsonValue]


class DoubleBakingEvidence(_ContentsBase):
    kind: Literal["double_baking_evidence"]
    bh1: dict[str, JsonValue]
    bh2: dict[str, JsonValue]


class ActivateAccount(_ContentsBase):
    kind: Literal["activate_account"]
    pkh: StrictStr
    secret: StrictStr


class Proposals(_ContentsBase):
    kind: Literal["proposals"]
    source: StrictStr
    period: StrictInt
    proposals: list[StrictStr]


class Ballot(_ContentsBase):
    kind: Literal["ballot"]
    source: StrictStr
    period: StrictInt
    proposal: StrictStr
    ballot: StrictStr


class FailingNoop(_ContentsBase):
    kind: Literal["failing_noop"]
    arbitrary: StrictStr


class Reveal(_ManagerOperation):
    kind: Literal["reveal"]
    public_key: StrictStr


class Transaction(_ManagerOperation):
    kind: Literal["transaction"]
    amount: NumericText
    destination: StrictStr
    parameters: JsonValue = None


class Origination(_ManagerOperation):
    kind: Literal["origination"]
    balance: NumericText
    delegate: StrictStr | None = None
    script: JsonValue = None
    # pre-Babylon protocols only
    manager_pubkey: StrictStr | None = Field(default=None, alias="managerPubkey")
    spendable: StrictBool | None = None
    delegatable: StrictBool | None = None


class Delegation(_ManagerOperation):
    """Sets the source's delegate; no ``delegate`` means withdrawal."""

    kind: Literal["delegation"]
    delegate: StrictStr | None = None


class RegisterGlobalConstant(_ManagerOperation):
    kind: Literal["register_global_constant"]
    value: JsonValue


class SetDepositsLimit(_ManagerOperation):
    kind: Literal["set_deposits_limit"]
    limit: NumericText | None = None


class UnknownContents(WireModel):
    """A kind this package has no variant for. Every key is kept as sent."""

    kind: StrictStr
    metadata: JsonValue = None


UNKNOWN_KIND_TAG = "__unknown__"
_KNOWN_KINDS = frozenset(kind.value for kind in OperationKind)


def _contents_tag(value: object) -> str | None:
    """Tag for the union below: the wire kind, or the fallback for unknown ones."""
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    if kind is None:
        return None
    if isinstance(kind, str) and kind in _KNOWN_KINDS:
        return kind
    return UNKNOWN_KIND_TAG


Contents = Annotated[
    Union[
        Annotated[Endorsement, Tag("endorsement")],
        Annotated[EndorsementWithSlot, Tag("endorsement_with_slot")],
        Annotated[Preendorsement, Tag("preendorsement")],
        Annotated[SeedNonceRevelation, Tag("seed_nonce_revelation")],
        Annotated[DoubleEndorsementEvidence, Tag("double_endorsement_evidence")],
        Annotated[DoublePreendorsementEvidence, Tag("double_preendorsement_evidence")],
        Annotated[DoubleBakingEvidence, Tag("double_baking_evidence")],
        Annotated[ActivateAccount, Tag("activate_account")],
        Annotated[Proposals, Tag("proposals")],
        Annotated[Ballot, Tag("ballot")],
        Annotated[FailingNoop, Tag("failing_noop")],
        Annotated[Reveal, Tag("reveal")],
        Annotated[Transaction, Tag("transaction")],
        Annotated[Origination, Tag("origination")],
        Annotated[Delegation, Tag("delegation")],
        Annotated[RegisterGlobalConstant, Tag("register_global_constant")],
        Annotated[SetDepositsLimit, Tag("set_deposits_limit")],
        Annotated[UnknownContents, Tag(UNKNOWN_KIND_TAG)],
    ],
    Discriminator(_contents_tag),
]

CONTENTS_ADAPTER: TypeAdapter[Contents] = TypeAdapter(Contents)


def decode_contents(raw: object) -> Contents:
    """Pick the variant named by ``raw["kind"]`` and validate against it.

    Kinds without a variant decode to ``UnknownContents``; a missing kind fails.
    """
    return CONTENTS_ADAPTER.validate_python(raw)


def operation_kind(contents: Contents) -> OperationKind | None:
    """The contents' kind, or None for ``UnknownContents``."""
    if isinstance(contents, UnknownContents):
        return None
    return OperationKind(contents.kind)
