import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

def new_id(prefix: str) -> str:
    millis = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"{prefix}-{millis}-{uuid.uuid4().hex[:7]}"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase in the JSON document and on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class TimestampMixin(CamelModel):
    created_at: str | None = None
    updated_at: str | None = None
