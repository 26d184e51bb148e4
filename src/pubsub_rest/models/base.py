"""Base models for the Pub/Sub REST wire format."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Base model that maps snake_case fields to the camelCase names used by the REST API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
