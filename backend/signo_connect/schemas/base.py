"""Schema Base — camelCase JSON boundary shared by every request model and response.

Invariants:
    - Request JSON uses camelCase keys; snake_case field names are accepted too
    - Storage records (snake_case dicts) leave the API through camelize()
    - Partial updates go through to_changes(): unsent and null fields are both skipped,
      so a PATCH never writes null into a required column
    - camelize() only renames identifier keys ("in-progress" stays as is); values
      are encoded by FastAPI's jsonable_encoder

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule, no drift
    - camelize is recursive so joined records (application + job + driver) convert in one call
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request bodies: camelCase aliases, field names also accepted."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True,
    )

    def to_record(self) -> dict:
        """Snake_case dict for storage (enums as their values)."""
        return self.model_dump(mode="python")

    def to_changes(self) -> dict:
        """Fields the client sent with a value; an explicit null leaves the stored value alone."""
        return self.model_dump(mode="python", exclude_unset=True, exclude_none=True)


def camelize(value: object) -> object:
    """Recursively rename dict keys from snake_case to camelCase."""
    if isinstance(value, dict):
        return {
            (to_camel(k) if isinstance(k, str) and k.isidentifier() else k): camelize(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [camelize(v) for v in value]
    return value
