"""JSON schema kind classification for runtime type descriptors.

Maps a type descriptor (canonical name plus array/enum flags) onto the small
fixed vocabulary of JSON schema primitive kinds used when building component
documentation and validating endpoint configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, get_origin

from pydantic import BaseModel, ConfigDict, Field

from packages.common.logging import get_logger

logger = get_logger(__name__)


# ========== Enums ==========


class SchemaKind(str, Enum):
    """JSON schema kinds a type descriptor can classify to."""

    ENUM = "enum"
    ARRAY = "array"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    OBJECT = "object"


# ========== Primitive Lookup ==========


def _both_forms(short_name: str, kind: SchemaKind) -> dict[str, SchemaKind]:
    return {short_name: kind, f"java.lang.{short_name}": kind}


# Canonical type name -> schema kind. Names match case-sensitively.
PRIMITIVE_SCHEMA_KINDS: dict[str, SchemaKind] = {
    # binary payloads travel as encoded strings
    **_both_forms("byte[]", SchemaKind.STRING),
    **_both_forms("Byte[]", SchemaKind.ARRAY),
    **_both_forms("Object[]", SchemaKind.ARRAY),
    **_both_forms("String[]", SchemaKind.ARRAY),
    **_both_forms("String", SchemaKind.STRING),
    **_both_forms("Boolean", SchemaKind.BOOLEAN),
    "boolean": SchemaKind.BOOLEAN,
    **_both_forms("Integer", SchemaKind.INTEGER),
    "int": SchemaKind.INTEGER,
    **_both_forms("Long", SchemaKind.INTEGER),
    "long": SchemaKind.INTEGER,
    **_both_forms("Short", SchemaKind.INTEGER),
    "short": SchemaKind.INTEGER,
    **_both_forms("Byte", SchemaKind.INTEGER),
    "byte": SchemaKind.INTEGER,
    **_both_forms("Float", SchemaKind.NUMBER),
    "float": SchemaKind.NUMBER,
    **_both_forms("Double", SchemaKind.NUMBER),
    "double": SchemaKind.NUMBER,
}

# Python builtins -> canonical names used by TypeDescriptor.from_python_type
_PYTHON_TYPE_NAMES: dict[type, str] = {
    str: "java.lang.String",
    bool: "boolean",
    int: "long",
    float: "double",
    bytes: "byte[]",
    bytearray: "byte[]",
    list: "java.lang.Object[]",
    tuple: "java.lang.Object[]",
}


# ========== Type Descriptor ==========


class TypeDescriptor(BaseModel):
    """Caller-supplied identification of a runtime type.

    Attributes:
        name: Canonical type name, fully-qualified (``java.lang.Long``) or short
            (``long``, ``String[]``).
        is_array: True when the runtime type is an array type.
        is_enum: True when the runtime type is an enumeration.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(..., description="Canonical type name")
    is_array: bool = Field(False, description="Runtime type is an array")
    is_enum: bool = Field(False, description="Runtime type is an enumeration")

    @classmethod
    def from_canonical_name(cls, name: str, *, is_enum: bool = False) -> TypeDescriptor:
        """Build a descriptor from a canonical name, deriving the array flag.

        A trailing ``[]`` marks an array type, the same way a runtime array
        class reports itself. Note this makes ``byte[]`` classify as ``array``
        while its primitive mapping is still ``string``.

        Args:
            name: Canonical type name.
            is_enum: Whether the type is an enumeration.

        Returns:
            TypeDescriptor: Descriptor for the named type.
        """
        return cls(name=name, is_array=name.endswith("[]"), is_enum=is_enum)

    @classmethod
    def from_python_type(cls, tp: type[Any]) -> TypeDescriptor:
        """Build a descriptor for a Python type.

        Builtins are mapped onto the canonical names of the primitive table,
        ``Enum`` subclasses are flagged as enumerations and anything else is
        named by its qualified name (and so classifies as ``object``).
        Parameterized generics such as ``list[int]`` are described by their
        origin type; the element type is not recorded.

        Args:
            tp: Python type to describe.

        Returns:
            TypeDescriptor: Descriptor for the type.
        """
        origin = get_origin(tp)
        if isinstance(origin, type):
            tp = origin

        if isinstance(tp, type) and issubclass(tp, Enum):
            return cls(name=f"{tp.__module__}.{tp.__qualname__}", is_enum=True)

        for builtin, name in _PYTHON_TYPE_NAMES.items():
            if tp is builtin:
                return cls(name=name, is_array=builtin in (list, tuple))

        qualname = getattr(tp, "__qualname__", None) or repr(tp)
        module = getattr(tp, "__module__", "builtins")
        return cls(name=f"{module}.{qualname}")


# ========== Classification ==========


def primitive_only(descriptor: TypeDescriptor) -> SchemaKind | None:
    """Get the JSON schema primitive kind for a type.

    Only the canonical name is consulted; array and enum flags are ignored.

    Args:
        descriptor: Type to look up.

    Returns:
        SchemaKind | None: The primitive kind, or None if the type is not a
            recognized primitive.
    """
    return PRIMITIVE_SCHEMA_KINDS.get(descriptor.name)


def classify(descriptor: TypeDescriptor) -> SchemaKind:
    """Get the JSON schema kind for a type.

    Precedence: enumeration, then array, then the primitive table, then
    ``object`` as the generic fallback.

    Args:
        descriptor: Type to classify.

    Returns:
        SchemaKind: The schema kind, never None.
    """
    if descriptor.is_enum:
        return SchemaKind.ENUM
    if descriptor.is_array:
        return SchemaKind.ARRAY

    primitive = primitive_only(descriptor)
    if primitive is not None:
        return primitive

    logger.debug(f"No primitive kind for {descriptor.name!r}, using object")
    return SchemaKind.OBJECT


__all__ = [
    "PRIMITIVE_SCHEMA_KINDS",
    "SchemaKind",
    "TypeDescriptor",
    "classify",
    "primitive_only",
]
