"""Work item and request descriptor models.

Architecture:
    WorkItem is the immutable input record handed to the gateway; one is
    consumed per routing pass. RequestDescriptor is what the router produces
    for it: the HTTP verb, the resolved endpoint path and the query/body
    parameters. Neither is shared across items.

Design Decisions:
    - WorkItem is a frozen Pydantic model so loosely typed host input
      (plain dicts) is validated once at the boundary
    - Parameter aliases (``targetId``, ``returnAll``) are normalized to
      snake_case on construction so endpoint builders see one naming
    - RequestDescriptor is a frozen dataclass with a read-only params view
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import HttpMethod
from .exceptions import MissingParameterError, ValidationError

_MISSING: Any = object()

# camelCase names used by workflow hosts -> names used by endpoint builders
_PARAM_ALIASES = {
    "targetId": "target_id",
    "returnAll": "return_all",
}

_RESERVED_KEYS = ("index", "resource", "operation")


class WorkItem(BaseModel):
    """One input record: resource, operation and operation-specific fields."""

    index: int = Field(..., ge=0)
    resource: str = Field(..., min_length=1)
    operation: str = Field(..., min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("params", mode="before")
    @classmethod
    def _normalize_aliases(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {_PARAM_ALIASES.get(key, key): val for key, val in value.items()}

    @classmethod
    def from_mapping(
        cls,
        index: int,
        data: Mapping[str, Any],
        default_operation: str | None = None,
    ) -> WorkItem:
        """Build a WorkItem from a flat mapping.

        ``resource`` and ``operation`` are lifted out; every other key becomes
        a parameter. A nested ``params`` mapping is merged in as well.

        Args:
            index: Position of the item in the input sequence
            data: Flat mapping such as ``{"resource": "comment", "targetId": "t3_x"}``
            default_operation: Operation to use when ``data`` names none

        Returns:
            Validated WorkItem
        """
        if "resource" not in data:
            raise MissingParameterError("resource")
        operation = data.get("operation")
        if operation is None:
            operation = default_operation
        if operation is None:
            raise MissingParameterError("operation")
        params = {k: v for k, v in data.items() if k not in (*_RESERVED_KEYS, "params")}
        nested = data.get("params")
        if nested is not None:
            if not isinstance(nested, Mapping):
                raise ValidationError("'params' must be a mapping")
            params.update(nested)
        return cls(
            index=index,
            resource=data["resource"],
            operation=operation,
            params=params,
        )

    def param(self, name: str, default: Any = _MISSING) -> Any:
        """Return a parameter value.

        Raises:
            MissingParameterError: If the parameter is absent (or None) and
                no default was given
        """
        value = self.params.get(name)
        if value is None:
            if default is _MISSING:
                raise MissingParameterError(name)
            return default
        return value

    def has_param(self, name: str) -> bool:
        return self.params.get(name) is not None


@dataclass(frozen=True)
class RequestDescriptor:
    """Resolved HTTP call for one work item."""

    method: HttpMethod
    endpoint: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            method = (
                self.method
                if isinstance(self.method, HttpMethod)
                else HttpMethod(self.method.upper())
            )
        except (AttributeError, ValueError) as exc:
            raise ValidationError(f"Unsupported HTTP method: {self.method}") from exc
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
