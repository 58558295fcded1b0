from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_input(model: type[ModelT], **data: Any) -> ModelT:
    """Build an input DTO, reporting the first failing field as a ValidationError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as err:
        first = err.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or model.__name__
        raise ValidationError(f"{field}: {first['msg']}", field=field) from err
