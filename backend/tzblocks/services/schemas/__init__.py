"""Wire schemas for node RPC block payloads."""

from tzblocks.services.schemas.block import (
    Block,
    Header,
    Level,
    MaxOperationListLength,
    Metadata,
    NonceHashState,
    OperationGroup,
    TestChainStatus,
)
from tzblocks.services.schemas.common import NumericText, WireModel
from tzblocks.services.schemas.contents import (
    ActivateAccount,
    BalanceUpdate,
    Ballot,
    Contents,
    ContentsMetadata,
    Delegation,
    DoubleBakingEvidence,
    DoubleEndorsementEvidence,
    DoublePreendorsementEvidence,
    Endorsement,
    EndorsementWithSlot,
    FailingNoop,
    OperationError,
    OperationKind,
    OperationResult,
    Origination,
    Preendorsement,
    Proposals,
    RegisterGlobalConstant,
    Reveal,
    SeedNonceRevelation,
    SetDepositsLimit,
    Transaction,
    UnknownContents,
    decode_contents,
    operation_kind,
)

__all__ = [
    # Envelope
    "Block",
    "Header",
    "Level",
    "MaxOperationListLength",
    "Metadata",
    "NonceHashState",
    "OperationGroup",
    "TestChainStatus",
    # Contents
    "ActivateAccount",
    "BalanceUpdate",
    "Ballot",
    "Contents",
    "ContentsMetadata",
    "Delegation",
    "DoubleBakingEvidence",
    "DoubleEndorsementEvidence",
    "DoublePreendorsementEvidence",
    "Endorsement",
    "EndorsementWithSlot",
    "FailingNoop",
    "OperationError",
    "OperationKind",
    "OperationResult",
    "Origination",
    "Preendorsement",
    "Proposals",
    "RegisterGlobalConstant",
    "Reveal",
    "SeedNonceRevelation",
    "SetDepositsLimit",
    "Transaction",
    "UnknownContents",
    "decode_contents",
    "operation_kind",
    # Common
    "NumericText",
    "WireModel",
]
