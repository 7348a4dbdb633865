from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


def reject_bool(v: Any) -> Any:
    """Reject JSON booleans before int coercion"""
    if isinstance(v, bool):
        raise ValueError("Input should be a valid integer")
    return v


# Integer field that still accepts numeric strings such as "30"
WholeNumber = Annotated[int, BeforeValidator(reject_bool)]


class RecordBase(CamelModel):
    id: int


class PartialUpdate(CamelModel):
    """Base for PATCH bodies: every field optional, but never null"""

    @field_validator("*")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Value cannot be null")
        return v


class ErrorResponse(BaseModel):
    """Body of 401, 404 and 500 responses"""
    error: str


class FieldError(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    """Body of 400 responses"""
    errors: List[FieldError]


NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "Record not found"}
VALIDATION_RESPONSE = {"model": ValidationErrorResponse, "description": "Validation error"}
