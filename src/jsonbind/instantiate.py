# src/jsonbind/instantiate.py
"""Build target-type instances from mappings without calling their constructor."""

from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def is_pydantic(target_type: Type) -> bool:
    """Check if type is a Pydantic BaseModel."""
    try:
        return isinstance(target_type, type) and issubclass(target_type, BaseModel)
    except TypeError:
        return False


def instantiate(data: Mapping[str, Any], target_type: Type[T]) -> T:
    """
    Create an instance of *target_type* carrying exactly the fields of *data*.

    ``__init__`` is never called, so required constructor arguments are not
    enforced here; callers validate first. Pydantic models go through
    ``model_construct``, which likewise skips validation.
    """
    if is_pydantic(target_type):
        return target_type.model_construct(**data)

    instance = target_type.__new__(target_type)
    fields = getattr(instance, "__dict__", None)
    if fields is not None:
        # plain storage: keys such as "__class__" must not hit attribute hooks
        fields.update(data)
        return instance

    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
