"""Classify command for schemascan CLI."""

from __future__ import annotations

from rich.console import Console

from packages.common.logging import get_logger
from packages.schemas.json_schema import TypeDescriptor, classify, primitive_only

console = Console(emoji=False)
logger = get_logger(__name__)


def classify_command(
    name: str,
    is_array: bool | None = None,
    is_enum: bool = False,
    primitive: bool = False,
) -> None:
    """Print the JSON schema kind of a type name.

    Args:
        name: Canonical type name.
        is_array: Array flag. None derives it from a trailing ``[]``.
        is_enum: Whether the type is an enumeration.
        primitive: Only consult the primitive table, printing ``none`` when
            the name is not a recognized primitive.
    """
    descriptor = TypeDescriptor.from_canonical_name(name, is_enum=is_enum)
    if is_array is not None:
        descriptor = descriptor.model_copy(update={"is_array": is_array})

    if primitive:
        kind = primitive_only(descriptor)
        label = kind.value if kind is not None else "none"
    else:
        label = classify(descriptor).value

    logger.debug(f"Classified {descriptor!r} as {label}")
    console.print(label, markup=False, highlight=False)


__all__ = ["classify_command"]
