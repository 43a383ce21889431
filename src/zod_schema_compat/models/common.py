from typing import Any, Literal

from pydantic import BaseModel, Field


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
        "frozen": True,
    }

class Diagnostic(BasePydanticModel):
    """A schema node whose kind cannot be expressed in JSON Schema."""
    kind: str # Normalised kind tag, e.g. "set" or "date"
    path: str # Structural address from the root, e.g. "$.user<union[1]>.tags"

    def __str__(self) -> str:
        return f"{self.path}: {self.kind}"

# Shape a native converter's output must have before it is trusted as a tool
# parameter schema.
class NativeObjectSchema(BaseModel):
    type: Literal["object"]
    properties: dict[str, Any]
    additional_properties: Any = Field(..., alias="additionalProperties")

    model_config = {
        "extra": "allow",  # $schema, required, description, ...
        "populate_by_name": True,
    }
