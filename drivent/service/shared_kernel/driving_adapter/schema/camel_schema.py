from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema for the client wire format: camelCase keys in and out."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
