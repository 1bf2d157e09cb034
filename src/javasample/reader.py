"""
Class-file reader (binary .class → structural model).

Reads the class-file layout:
    magic, minor/major version, constant pool, access flags,
    this/super class, interfaces, fields, methods, attributes

and resolves names and descriptors through the constant pool into
ClassInfo / FieldInfo / MethodInfo.

Constant pool notes:
    - Index 0 is unused; entries start at 1
    - Long and Double entries take two slots (the second is unusable)
    - Utf8 entries are decoded as UTF-8

Member attributes (Code, Signature, ...) are read and skipped.
The class-level InnerClasses attribute fills ClassInfo.inner_classes.
"""

import struct
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from javasample.model import ClassInfo, FieldInfo, MethodInfo, mask_to_flags

MAGIC = 0xCAFEBABE

# Constant pool tags
CONSTANT_UTF8 = 1
CONSTANT_INTEGER = 3
CONSTANT_FLOAT = 4
CONSTANT_LONG = 5
CONSTANT_DOUBLE = 6
CONSTANT_CLASS = 7
CONSTANT_STRING = 8
CONSTANT_FIELDREF = 9
CONSTANT_METHODREF = 10
CONSTANT_INTERFACE_METHODREF = 11
CONSTANT_NAME_AND_TYPE = 12
CONSTANT_METHOD_HANDLE = 15
CONSTANT_METHOD_TYPE = 16
CONSTANT_INVOKE_DYNAMIC = 18

# tag -> struct format of the entry body (Utf8 is variable length)
_CONSTANT_FORMATS = {
    CONSTANT_INTEGER: ">i",
    CONSTANT_FLOAT: ">f",
    CONSTANT_LONG: ">q",
    CONSTANT_DOUBLE: ">d",
    CONSTANT_CLASS: ">H",
    CONSTANT_STRING: ">H",
    CONSTANT_FIELDREF: ">HH",
    CONSTANT_METHODREF: ">HH",
    CONSTANT_INTERFACE_METHODREF: ">HH",
    CONSTANT_NAME_AND_TYPE: ">HH",
    CONSTANT_METHOD_HANDLE: ">BH",
    CONSTANT_METHOD_TYPE: ">H",
    CONSTANT_INVOKE_DYNAMIC: ">HH",
}

_WIDE_TAGS = {CONSTANT_LONG, CONSTANT_DOUBLE}


class ClassReadError(ValueError):
    """Raised when class-file bytes cannot be read."""
    pass


@dataclass
class Constant:
    """
    One constant pool entry.

    value holds the decoded body:
        Utf8            -> str
        Integer/Float/Long/Double -> number
        everything else -> tuple of indices (and reference kind for MethodHandle)
    """

    tag: int
    value: Any


@dataclass
class ClassFile:
    """
    The raw parsed class file, before name resolution.

    Members keep their constant pool indices; resolve() turns the whole
    thing into a ClassInfo.
    """

    minor_version: int
    major_version: int
    constant_pool: List[Optional[Constant]]
    access_flags: int
    this_class: int
    super_class: int
    interfaces: List[int] = field(default_factory=list)
    fields: List[Tuple[int, int, int]] = field(default_factory=list)
    methods: List[Tuple[int, int, int]] = field(default_factory=list)
    attributes: Dict[str, bytes] = field(default_factory=dict)

    def utf8(self, index: int) -> str:
        return self._entry(index, CONSTANT_UTF8).value

    def class_name(self, index: int) -> str:
        (name_index,) = self._entry(index, CONSTANT_CLASS).value
        return self.utf8(name_index)

    def _entry(self, index: int, tag: int) -> Constant:
        if index <= 0 or index >= len(self.constant_pool) or self.constant_pool[index] is None:
            raise ClassReadError(f"Invalid constant pool index: {index}")
        entry = self.constant_pool[index]
        if entry.tag != tag:
            raise ClassReadError(f"Constant pool entry {index} has tag {entry.tag}, expected {tag}")
        return entry

    def resolve(self) -> ClassInfo:
        name = self.class_name(self.this_class)
        return ClassInfo(
            name=name,
            super_name=self.class_name(self.super_class) if self.super_class else None,
            interfaces=[self.class_name(i) for i in self.interfaces],
            access=set(mask_to_flags(self.access_flags)),
            fields=[
                FieldInfo(name=self.utf8(n), descriptor=self.utf8(d), access=set(mask_to_flags(a)))
                for a, n, d in self.fields
            ],
            methods=[
                MethodInfo(name=self.utf8(n), descriptor=self.utf8(d), access=set(mask_to_flags(a)))
                for a, n, d in self.methods
            ],
            inner_classes=self._inner_classes(name),
        )

    def _inner_classes(self, outer_name: str) -> List[str]:
        """Names of classes whose InnerClasses record names this class as outer."""
        data = self.attributes.get("InnerClasses")
        if data is None:
            return []
        reader = _ByteReader(data)
        inner = []
        for _ in range(reader.u2()):
            inner_index, outer_index, _name_index, _flags = reader.unpack(">HHHH")
            if outer_index and self.class_name(outer_index) == outer_name:
                inner.append(self.class_name(inner_index))
        return inner


class _ByteReader:
    """Big-endian cursor over a bytes object."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def unpack(self, fmt: str) -> Tuple[Any, ...]:
        try:
            values = struct.unpack_from(fmt, self.data, self.offset)
        except struct.error:
            raise ClassReadError(f"Truncated class file at offset {self.offset}") from None
        self.offset += struct.calcsize(fmt)
        return values

    def u1(self) -> int:
        return self.unpack(">B")[0]

    def u2(self) -> int:
        return self.unpack(">H")[0]

    def u4(self) -> int:
        return self.unpack(">I")[0]

    def read(self, length: int) -> bytes:
        if self.offset + length > len(self.data):
            raise ClassReadError(f"Truncated class file at offset {self.offset}")
        chunk = self.data[self.offset:self.offset + length]
        self.offset += length
        return chunk


def _read_constant_pool(reader: _ByteReader) -> List[Optional[Constant]]:
    count = reader.u2()
    pool: List[Optional[Constant]] = [None] * count
    index = 1
    while index < count:
        tag = reader.u1()
        if tag == CONSTANT_UTF8:
            raw = reader.read(reader.u2())
            try:
                value: Any = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ClassReadError(f"Invalid Utf8 constant at index {index}: {e}") from None
        elif tag in _CONSTANT_FORMATS:
            value = reader.unpack(_CONSTANT_FORMATS[tag])
            if tag in (CONSTANT_INTEGER, CONSTANT_FLOAT, CONSTANT_LONG, CONSTANT_DOUBLE):
                value = value[0]
        else:
            raise ClassReadError(f"Invalid constant pool tag {tag} at index {index}")
        pool[index] = Constant(tag=tag, value=value)
        index += 2 if tag in _WIDE_TAGS else 1
    return pool


def _read_attributes(reader: _ByteReader, pool: List[Optional[Constant]]) -> Dict[str, bytes]:
    attributes = {}
    for _ in range(reader.u2()):
        name_index = reader.u2()
        body = reader.read(reader.u4())
        entry = pool[name_index] if 0 < name_index < len(pool) else None
        if entry is None or entry.tag != CONSTANT_UTF8:
            raise ClassReadError(f"Invalid attribute name index: {name_index}")
        attributes[entry.value] = body
    return attributes


def _read_members(reader: _ByteReader, pool: List[Optional[Constant]]) -> List[Tuple[int, int, int]]:
    members = []
    for _ in range(reader.u2()):
        access, name_index, descriptor_index = reader.unpack(">HHH")
        _read_attributes(reader, pool)
        members.append((access, name_index, descriptor_index))
    return members


def parse_class_bytes(data: bytes) -> ClassFile:
    """
    Parse class-file bytes without resolving names.

    Raises:
        ClassReadError: On bad magic, unknown constant pool tag,
            truncated input or trailing bytes
    """
    reader = _ByteReader(data)

    magic = reader.u4()
    if magic != MAGIC:
        raise ClassReadError(f"Bad magic number: 0x{magic:08X}")

    minor, major = reader.unpack(">HH")
    pool = _read_constant_pool(reader)
    access, this_class, super_class = reader.unpack(">HHH")
    interfaces = [reader.u2() for _ in range(reader.u2())]
    fields = _read_members(reader, pool)
    methods = _read_members(reader, pool)
    attributes = _read_attributes(reader, pool)

    if reader.offset != len(data):
        raise ClassReadError(f"{len(data) - reader.offset} trailing bytes after class file")

    return ClassFile(
        minor_version=minor,
        major_version=major,
        constant_pool=pool,
        access_flags=access,
        this_class=this_class,
        super_class=super_class,
        interfaces=interfaces,
        fields=fields,
        methods=methods,
        attributes=attributes,
    )


def read_class(data: bytes) -> ClassInfo:
    """
    Read class-file bytes into a ClassInfo.

    Access flags are those stored in the file, so a compiled class
    usually carries SUPER and a nested class loses its STATIC modifier.

    Raises:
        ClassReadError: If the bytes are not a readable class file
    """
    return parse_class_bytes(data).resolve()


def read_class_file(filepath: str) -> ClassInfo:
    """
    Read a .class file from disk.

    Raises:
        FileNotFoundError: If file doesn't exist
        ClassReadError: If parsing fails
    """
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Class file not found: {filepath}")
    return read_class(data)


__all__ = [
    "ClassFile",
    "ClassReadError",
    "Constant",
    "parse_class_bytes",
    "read_class",
    "read_class_file",
]
