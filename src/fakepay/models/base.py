"""Base model for FakePay SDK."""
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

M = TypeVar("M", bound="FakePayModel")


class FakePayModel(BaseModel):
    """Base model with common configuration.

    Field names are snake_case in Python and carry the gateway's
    camelCase names as aliases.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to its wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def build(cls: type[M], **fields: Any) -> M:
        """Validate keyword arguments into a request model.

        Raises:
            ValidationError: naming the first offending argument
        """
        try:
            return cls(**fields)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = _field_name(cls, error["loc"][0] if error["loc"] else "")
            if fields.get(field) is None or fields.get(field) == "":
                message = f"{field} is required"
            else:
                message = f"{field}: {error['msg']}"
            raise ValidationError(message, field=field) from exc


def _field_name(model_cls: type[BaseModel], loc: Any) -> str:
    """Map an error location (possibly an alias) back to the Python argument name."""
    for name, info in model_cls.model_fields.items():
        if loc in (name, info.alias):
            return name
    return str(loc)
