"""CallableResult model for the in-process execute() interface."""

from pydantic import BaseModel, ConfigDict


class CallableResult(BaseModel):
    """Result returned by `execute()`.

    Attributes:
        schema_version: Version of the CallableResult schema.
        items: One serialized FormDiagnostic per input payload.
        stats: Counts of inputs, valid and invalid payloads.
    """

    schema_version: str = "1.0"
    items: list[dict]
    stats: dict = {}

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> dict:
        """Convert to dictionary, leaving out empty stats."""
        result: dict = {"schema_version": self.schema_version, "items": self.items}
        if self.stats:
            result["stats"] = self.stats
        return result
