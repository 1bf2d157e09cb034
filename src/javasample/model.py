"""
Structural Model of Sample Classes

Describes classes the way a class file does:
    - Access flags (bit values from the class-file format)
    - Type descriptors ("I", "J", "(IJ)D", ...)
    - Fields and methods keyed by name and descriptor
    - Classes with their super class, interfaces and inner classes

ARCHITECTURAL RULE:
    These objects describe structure only.
    They never load, link or execute anything.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple


class DescriptorError(ValueError):
    """Raised when a type descriptor is malformed."""
    pass


class AccessFlag(Enum):
    """
    Access and property flags for classes, fields and methods.

    Values are the class-file bit masks. A member carries a set of these;
    the packed form is produced by flags_to_mask().
    """

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SUPER = 0x0020
    INTERFACE = 0x0200
    ABSTRACT = 0x0400
    SYNTHETIC = 0x1000
    ANNOTATION = 0x2000
    ENUM = 0x4000


def flags_to_mask(flags: Iterable[AccessFlag]) -> int:
    mask = 0
    for flag in flags:
        mask |= flag.value
    return mask


def mask_to_flags(mask: int) -> FrozenSet[AccessFlag]:
    """Unpack a bit mask. Bits with no AccessFlag are ignored."""
    return frozenset(flag for flag in AccessFlag if mask & flag.value)


# Base type codes used by the sample
BYTE = "B"
CHAR = "C"
DOUBLE = "D"
FLOAT = "F"
INT = "I"
LONG = "J"
SHORT = "S"
BOOLEAN = "Z"
VOID = "V"

_BASE_TYPES = {BYTE, CHAR, DOUBLE, FLOAT, INT, LONG, SHORT, BOOLEAN}


def object_type(class_name: str) -> str:
    """object_type("java/lang/String") -> "Ljava/lang/String;" """
    return f"L{class_name};"


def array_type(component: str) -> str:
    return f"[{component}"


def method_descriptor(params: List[str], ret: str) -> str:
    """method_descriptor(["I", "J"], "D") -> "(IJ)D" """
    return "(" + "".join(params) + ")" + ret


def _read_field_type(descriptor: str, pos: int) -> Tuple[str, int]:
    """Read one field type starting at pos. Returns (type, next_pos)."""
    start = pos
    while pos < len(descriptor) and descriptor[pos] == "[":
        pos += 1
    if pos >= len(descriptor):
        raise DescriptorError(f"Unexpected end of descriptor: {descriptor!r}")

    code = descriptor[pos]
    if code in _BASE_TYPES:
        return descriptor[start:pos + 1], pos + 1
    if code == "L":
        end = descriptor.find(";", pos)
        if end == -1 or end == pos + 1:
            raise DescriptorError(f"Unterminated class name in {descriptor!r}")
        return descriptor[start:end + 1], end + 1
    raise DescriptorError(f"Invalid type code {code!r} in {descriptor!r}")


def parse_field_descriptor(descriptor: str) -> str:
    """Validate a field descriptor and return it."""
    ftype, pos = _read_field_type(descriptor, 0)
    if pos != len(descriptor):
        raise DescriptorError(f"Trailing characters in field descriptor {descriptor!r}")
    return ftype


def parse_method_descriptor(descriptor: str) -> Tuple[List[str], str]:
    """
    Split a method descriptor into parameter types and return type.

    Example:
        parse_method_descriptor("(IJ)D") == (["I", "J"], "D")
        parse_method_descriptor("([Ljava/lang/String;)V") == (["[Ljava/lang/String;"], "V")

    Raises:
        DescriptorError: If the descriptor is malformed
    """
    if not descriptor.startswith("("):
        raise DescriptorError(f"Method descriptor must start with '(': {descriptor!r}")

    params: List[str] = []
    pos = 1
    while pos < len(descriptor) and descriptor[pos] != ")":
        ptype, pos = _read_field_type(descriptor, pos)
        params.append(ptype)
    if pos >= len(descriptor):
        raise DescriptorError(f"Missing ')' in method descriptor {descriptor!r}")

    ret = descriptor[pos + 1:]
    if ret == VOID:
        return params, ret
    return params, parse_field_descriptor(ret)


@dataclass
class FieldInfo:
    """
    A declared field.

    Properties:
        name: Field name (e.g., "a")
        descriptor: Field descriptor (e.g., "I")
        access: Access flags
    """

    name: str
    descriptor: str
    access: Set[AccessFlag] = field(default_factory=set)

    @property
    def is_static(self) -> bool:
        return AccessFlag.STATIC in self.access


@dataclass
class MethodInfo:
    """
    A declared method.

    Properties:
        name: Method name (e.g., "add")
        descriptor: Method descriptor (e.g., "(IJ)D")
        access: Access flags

    A method is identified by name AND descriptor, see key.
    """

    name: str
    descriptor: str
    access: Set[AccessFlag] = field(default_factory=set)

    @property
    def key(self) -> str:
        """Lookup key, e.g. "add(IJ)D"."""
        return self.name + self.descriptor

    @property
    def is_static(self) -> bool:
        return AccessFlag.STATIC in self.access

    @property
    def parameter_types(self) -> List[str]:
        return parse_method_descriptor(self.descriptor)[0]

    @property
    def return_type(self) -> str:
        return parse_method_descriptor(self.descriptor)[1]


@dataclass
class ClassInfo:
    """
    A declared class or interface.

    Properties:
        name:
            Internal binary name, slash separated
            Examples: "Test", "Test$A", "java/lang/Object"

        super_name:
            Internal name of the super class (None only for java/lang/Object)

        interfaces:
            Internal names of implemented interfaces

        access:
            Class access flags

        fields, methods:
            Declared members, in declaration order

        inner_classes:
            Internal names of classes nested inside this one

    INVARIANTS:
        - Field names are unique within a class
        - Method keys (name + descriptor) are unique within a class
    """

    name: str
    super_name: Optional[str] = "java/lang/Object"
    interfaces: List[str] = field(default_factory=list)
    access: Set[AccessFlag] = field(default_factory=set)
    fields: List[FieldInfo] = field(default_factory=list)
    methods: List[MethodInfo] = field(default_factory=list)
    inner_classes: List[str] = field(default_factory=list)

    @property
    def simple_name(self) -> str:
        """Name without package or outer class: "Test$A" -> "A"."""
        return self.name.rsplit("/", 1)[-1].rsplit("$", 1)[-1]

    @property
    def is_interface(self) -> bool:
        return AccessFlag.INTERFACE in self.access

    def get_field(self, name: str) -> Optional[FieldInfo]:
        """
        Retrieve a field by name.

        Returns:
            FieldInfo or None if not found
        """
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def get_method(self, name: str, descriptor: Optional[str] = None) -> Optional[MethodInfo]:
        """
        Retrieve a method by name, optionally narrowed by descriptor.

        Without a descriptor the first method with that name is returned.

        Returns:
            MethodInfo or None if not found
        """
        for m in self.methods:
            if m.name == name and (descriptor is None or m.descriptor == descriptor):
                return m
        return None

    def method_keys(self) -> List[str]:
        return [m.key for m in self.methods]


__all__ = [
    "AccessFlag",
    "ClassInfo",
    "DescriptorError",
    "FieldInfo",
    "MethodInfo",
    "array_type",
    "flags_to_mask",
    "mask_to_flags",
    "method_descriptor",
    "object_type",
    "parse_field_descriptor",
    "parse_method_descriptor",
]
