from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDto(BaseModel):
    """
    Shared configuration for records, commands and results.

    Python code uses snake_case attributes while stored JSON uses camelCase
    keys; both names are accepted on input. Assignments are validated so an
    entity modified in place (e.g. a counter bump) cannot be persisted in an
    invalid state.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        validate_assignment=True,
    )
