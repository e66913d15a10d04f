"""
Flattener - turn one object into a PropertyMap of its top-level members.

Only one level of members is inspected. Member values are rendered with
their natural ``str()`` form, collections are summarized by element count,
and absent values become NULL_MARKER.
"""

import dataclasses
import logging
import numbers
import types
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from objcompare.comparison.exceptions import InvalidArgumentError
from objcompare.comparison.property_map import NULL_MARKER, PropertyMap

logger = logging.getLogger(__name__)

# Text-like values are iterable but are rendered as scalars
TEXT_TYPES = (str, bytes, bytearray)

# Class attributes that expose per-instance data
_DATA_DESCRIPTORS = (
    property,
    cached_property,
    types.GetSetDescriptorType,
    types.MemberDescriptorType,
)

# Class attributes that need arguments to be read
_ROUTINES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    types.WrapperDescriptorType,
    staticmethod,
    classmethod,
)

# Explicit member lists registered per type (overrides introspection)
_SCHEMAS: Dict[type, Tuple[str, ...]] = {}


class FieldKind(Enum):
    """How a member is turned into display text."""

    VALUE = "value"
    COLLECTION = "collection"
    INDEXED = "indexed"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One readable member of an object.

    Attributes:
        name: Member name as it appears on the object
        kind: FieldKind used to render the member
        render: Zero-argument callable producing the display text
    """

    name: str
    kind: FieldKind
    render: Callable[[], str]


def is_primitive(value: Any) -> bool:
    """
    Check whether a value is flattened as a single unnamed entry.

    Text, numbers, booleans, enum members and any iterable are
    primitive-like: their members are never enumerated.
    """
    return isinstance(value, TEXT_TYPES + (numbers.Number, Enum)) or isinstance(value, Iterable)


def is_collection(value: Any) -> bool:
    """Check whether a member value is summarized as ``<collection[N]>``."""
    return isinstance(value, Iterable) and not isinstance(value, TEXT_TYPES)


def render_value(value: Any) -> str:
    """Render a scalar member value, mapping None to NULL_MARKER."""
    if value is None:
        return NULL_MARKER
    return f"{value}"


def render_collection(value: Optional[Iterable]) -> str:
    """
    Summarize a collection by its element count.

    The collection is iterated exactly once, so one-shot iterators are
    consumed but counted correctly.
    """
    if value is None:
        return NULL_MARKER

    count = 0
    for _ in value:
        count += 1
    return f"<collection[{count}]>"


def register_schema(cls: type, field_names: Sequence[str]) -> None:
    """
    Register the members to read for instances of ``cls``.

    A registered schema replaces introspection for ``cls`` and its
    subclasses (the most specific registration wins).

    Args:
        cls: Type to register
        field_names: Member names to read, in any order

    Raises:
        InvalidArgumentError: If cls is not a type or a name is not a string
    """
    if not isinstance(cls, type):
        raise InvalidArgumentError(f"Schema target must be a type, got {type(cls).__name__}")

    names = tuple(field_names)
    for name in names:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"Schema field names must be non-empty strings: {name!r}")

    _SCHEMAS[cls] = names
    logger.debug(f"Registered schema for {cls.__name__}: {names}")


def unregister_schema(cls: type) -> None:
    """Remove a schema registered with register_schema (no-op if absent)."""
    _SCHEMAS.pop(cls, None)


def _lookup_schema(cls: type) -> Optional[Tuple[str, ...]]:
    for klass in cls.__mro__:
        if klass in _SCHEMAS:
            return _SCHEMAS[klass]
    return None


def _discover_member_names(value: Any) -> List[str]:
    names = set()

    if dataclasses.is_dataclass(value):
        names.update(f.name for f in dataclasses.fields(value))

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        names.update(instance_dict)

    for klass in type(value).__mro__:
        for name, attr in vars(klass).items():
            if isinstance(attr, _DATA_DESCRIPTORS):
                names.add(name)

    return sorted(name for name in names if not name.startswith("_"))


def _is_class_routine(value: Any, name: str) -> bool:
    # instance data shadows class attributes of the same name
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict) and name in instance_dict:
        return False
    for klass in type(value).__mro__:
        if name in vars(klass):
            return isinstance(vars(klass)[name], _ROUTINES)
    return False


def _describe(value: Any, name: str, strict: bool) -> FieldDescriptor:
    if _is_class_routine(value, name):
        return FieldDescriptor(name, FieldKind.INDEXED, lambda: "")

    try:
        member_value = getattr(value, name)
    except AttributeError as e:
        if strict:
            raise InvalidArgumentError(
                f"{type(value).__name__} has no readable member {name!r}"
            ) from e
        # unset slot
        member_value = None

    if is_collection(member_value):
        return FieldDescriptor(name, FieldKind.COLLECTION, lambda: render_collection(member_value))

    return FieldDescriptor(name, FieldKind.VALUE, lambda: render_value(member_value))


def list_fields(value: Any) -> List[FieldDescriptor]:
    """
    List the readable top-level members of an object.

    Members come from a registered schema when one exists for the object's
    type; otherwise from dataclass fields, instance attributes and
    class-level data descriptors (properties, slots, and C-level attributes
    such as ``datetime.year``). Names starting with an underscore are not
    public and are never listed. A discovered member that raises
    AttributeError when read (an unset slot) is treated as absent.

    Args:
        value: Object to inspect (not None)

    Returns:
        FieldDescriptor per member, ordered by name

    Raises:
        InvalidArgumentError: If value is None or a registered member is missing
    """
    if value is None:
        raise InvalidArgumentError("Cannot list fields of None")

    schema = _lookup_schema(type(value))
    if schema is not None:
        return [_describe(value, name, strict=True) for name in schema]
    return [_describe(value, name, strict=False) for name in _discover_member_names(value)]


def flatten(instance: Any) -> PropertyMap:
    """
    Convert an object into a PropertyMap of its top-level members.

    Primitive-like values produce a single entry under the empty key.
    Members that need arguments to be read (methods and other routines) are
    skipped. Collections render as ``<collection[N]>``. Absent values render
    as NULL_MARKER.

    Args:
        instance: Object to flatten (not None)

    Returns:
        PropertyMap iterated in ascending key order

    Raises:
        InvalidArgumentError: If instance is None

    Example:
        >>> flatten(Order(items=[1, 2, 3], note=None))
        PropertyMap({'items': '<collection[3]>', 'note': '<null>'})
    """
    if instance is None:
        raise InvalidArgumentError("Cannot flatten None; handle absent instances before calling")

    if is_primitive(instance):
        return PropertyMap({"": f"{instance}"})

    entries: Dict[str, str] = {}
    for descriptor in list_fields(instance):
        if descriptor.kind is FieldKind.INDEXED:
            logger.debug(f"Skipping indexed member {descriptor.name} of {type(instance).__name__}")
            continue
        entries[descriptor.name] = descriptor.render()

    logger.debug(f"Flattened {type(instance).__name__} into {len(entries)} properties")
    return PropertyMap(entries)
