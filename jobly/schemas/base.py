"""
Base schemas and common response models.

The API speaks camelCase (``numEmployees``); Python code uses snake_case.
Every schema accepts either spelling on input and emits camelCase.
"""
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestSchema(BaseSchema):
    """Request bodies reject fields they do not declare."""

    model_config = ConfigDict(extra="forbid")


class PatchSchema(RequestSchema):
    """
    Partial-update body.

    Only fields the client actually sent are forwarded, keyed by their API
    (camelCase) name; see ``to_update``.
    """

    # Fields whose columns are NOT NULL; an explicit null is rejected
    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "PatchSchema":
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

    def to_update(self) -> Dict[str, Any]:
        """Sent fields only, keyed by API name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class DeletedResponse(BaseSchema):
    """Confirms a delete by echoing the removed key."""

    deleted: Union[str, int]


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: Any
    details: Optional[Any] = None
