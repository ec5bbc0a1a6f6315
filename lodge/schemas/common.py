from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema for the JSON boundary.

    Attributes are snake_case like the ORM models; the wire format is
    camelCase (rent_amount <-> "rentAmount").
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    message: str


class DeleteCountResponse(BaseModel):
    """Acknowledgement of a bulk delete"""

    message: str
    count: int
