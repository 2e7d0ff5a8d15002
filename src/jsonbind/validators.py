# src/jsonbind/validators.py
"""
Validators for jsonbind.

Two interchangeable implementations of ``Validator``:

- ``FieldRuleValidator``: hand-written checks that stop at the first problem.
- ``SchemaValidator``: a pydantic model that reports every problem at once.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import (
    Any, ClassVar, Dict, Generic, List, Literal, Tuple, Type, TypeVar,
    get_args, get_origin,
)

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import AggregateValidationError, ValidationError
from .parser import OBJECT_REQUIRED
from .types import SafeParseFailure, SafeParseResult, SafeParseSuccess, Violation, ViolationKind

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class Validator(ABC):
    """Checks a structural value and returns the validated field mapping."""

    @abstractmethod
    def validate(self, obj: Any) -> Dict[str, Any]:
        """Return the validated mapping or raise a ``DeserializationError``."""


# ============================================================================
# HAND-WRITTEN VALIDATION
# ============================================================================

class FieldRuleValidator(Validator):
    """
    Validates string fields against closed sets of allowed values.

    Subclasses declare ``fields`` as an ordered mapping of field name to
    allowed values. Fields are checked in declaration order (presence, then
    type, then domain) and the first violation raises ``ValidationError``.
    Only declared fields are returned.
    """

    fields: ClassVar[Dict[str, Tuple[str, ...]]] = {}

    def validate(self, obj: Any) -> Dict[str, Any]:
        if not isinstance(obj, Mapping):
            raise ValidationError(
                OBJECT_REQUIRED,
                raw_input=obj,
                violation=Violation(ViolationKind.INVALID_TYPE, (), OBJECT_REQUIRED),
            )

        validated = {}
        for name, allowed in self.fields.items():
            value = obj.get(name)

            if name not in obj:
                self._fail(obj, ViolationKind.MISSING, name, f"{name} must be a string")
            if not isinstance(value, str):
                self._fail(obj, ViolationKind.INVALID_TYPE, name, f"{name} must be a string")
            if value not in allowed:
                self._fail(
                    obj,
                    ViolationKind.INVALID_VALUE,
                    name,
                    f"{name} must be one of: {', '.join(allowed)}",
                )

            validated[name] = value

        return validated

    @staticmethod
    def _fail(obj: Any, kind: ViolationKind, name: str, message: str) -> None:
        raise ValidationError(
            message,
            raw_input=obj,
            violation=Violation(kind, (name,), message),
        )


class SentimentObjectValidator(FieldRuleValidator):
    """Hand-written validator for ``SentimentObject`` payloads."""

    fields = {
        "sentiment": ("positive", "negative", "neutral"),
        "urgency": ("high", "medium", "low"),
    }


# ============================================================================
# SCHEMA VALIDATION
# ============================================================================

class SchemaValidator(Validator, Generic[M]):
    """
    Declarative validation backed by a pydantic model.

    Fields with a ``Literal[...]`` annotation are closed enumerations; their
    allowed values are named in every violation message. Unknown input keys
    are ignored and do not appear in the validated mapping.

    Example:
        class SentimentObjectSchema(BaseModel):
            sentiment: Literal["positive", "negative", "neutral"]
            urgency: Literal["high", "medium", "low"]

        schema = SchemaValidator(SentimentObjectSchema)
        schema.parse({"sentiment": "positive", "urgency": "high"})
    """

    def __init__(self, model: Type[M], *, name: str | None = None):
        self._model = model
        self._name = name or model.__name__
        self._domains: Dict[str, Tuple[Any, ...]] = {}
        for field_name, info in model.model_fields.items():
            if get_origin(info.annotation) is Literal:
                self._domains[info.alias or field_name] = get_args(info.annotation)

    @property
    def model(self) -> Type[M]:
        return self._model

    @property
    def name(self) -> str:
        return self._name

    def domain(self, field: str) -> Tuple[Any, ...]:
        """Allowed values of *field*, or an empty tuple if it is open."""
        return self._domains.get(field, ())

    def parse(self, obj: Any) -> Dict[str, Any]:
        """
        Validate *obj* and return the mapping of declared fields.

        Raises:
            AggregateValidationError: With every violation found
        """
        try:
            validated = self._model.model_validate(obj)
        except PydanticValidationError as e:
            violations = self._to_violations(e)
            logger.debug(
                "Schema %s rejected input with %d violation(s)",
                self._name, len(violations),
            )
            raise AggregateValidationError(
                violations,
                schema_name=self._name,
                raw_input=obj,
            ) from e
        return validated.model_dump(by_alias=True)

    def safe_parse(self, obj: Any) -> SafeParseResult[Dict[str, Any]]:
        """Like ``parse`` but returns the outcome instead of raising."""
        try:
            return SafeParseSuccess(self.parse(obj))
        except AggregateValidationError as e:
            return SafeParseFailure(e)

    def validate(self, obj: Any) -> Dict[str, Any]:
        return self.parse(obj)

    def _to_violations(self, error: PydanticValidationError) -> List[Violation]:
        violations = []
        for err in error.errors():
            path = tuple(err["loc"])
            kind = self._kind(err["type"])
            field = str(path[0]) if len(path) == 1 else None
            allowed = self._domains.get(field) if field is not None else None

            if allowed and kind is ViolationKind.INVALID_VALUE:
                # a literal mismatch of another primitive type is a type error
                value_type = type(err.get("input"))
                if not any(type(a) is value_type for a in allowed):
                    kind = ViolationKind.INVALID_TYPE

            if allowed:
                expected = ", ".join(str(a) for a in allowed)
                message = f"{field} must be one of: {expected}"
            elif not path and kind is ViolationKind.INVALID_TYPE:
                message = OBJECT_REQUIRED
            else:
                message = err["msg"]

            violations.append(Violation(kind, path, message))
        return violations

    @staticmethod
    def _kind(error_type: str) -> ViolationKind:
        if error_type == "missing":
            return ViolationKind.MISSING
        if error_type.endswith("_type"):
            return ViolationKind.INVALID_TYPE
        return ViolationKind.INVALID_VALUE
