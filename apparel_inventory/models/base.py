from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Wire models speak camelCase (packSize, orderFrom, createdAt) while the
    Python side keeps snake_case. Both spellings are accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def as_utc(value: datetime) -> datetime:
    """
    Timestamps are aware UTC everywhere. A naive value (a bare ISO string
    from a client, or a backend that drops the offset on read) is taken
    to already be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class DeleteAck(CamelModel):
    success: bool
    message: str
