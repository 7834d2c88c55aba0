"""Common/shared wire schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StrictStr, StringConstraints

from tzblocks.services._helpers import JsonDict

# Amounts, fees, counters and gas travel as decimal text; never parsed into numbers.
NumericText = Annotated[StrictStr, StringConstraints(pattern=r"^-?[0-9]+(\.[0-9]+)?$")]


class WireModel(BaseModel):
    """Base model for node RPC payloads.

    Scalars use the pydantic Strict* types, so a wrong-typed value is a
    validation error rather than a conversion. Frozen once decoded. Keys the
    schema does not name are kept as extras so that ``to_wire()`` gives back
    what the node sent.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    def to_wire(self) -> JsonDict:
        """Re-encode using wire keys, omitting fields the node never sent."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def is_present(self, name: str) -> bool:
        """True when ``name`` was on the wire, even if its value is falsy or null."""
        return name in self.model_fields_set
