from decimal import Decimal
from typing import Annotated, Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, PlainSerializer, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Decimal in the service layer, a plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope: {success, data?, count?, error?}."""
    success: bool
    data: Optional[T] = None
    count: Optional[int] = None
    error: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> Dict[str, Any]:
        payload = handler(self)
        for key in ("data", "count", "error"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with JSON-serializable values."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def ok(cls, data: Any, count: Optional[int] = None) -> "ApiResponse":
        return cls(success=True, data=data, count=count)

    @classmethod
    def listing(cls, items: list) -> "ApiResponse":
        return cls(success=True, data=items, count=len(items))

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(success=False, error=message)
