"""
Structural model of the sample source, built by hand.

Builds ClassInfo objects for Test, its nested class Test$A, and Test2,
with the modifiers as declared in source. Constructors the compiler adds
(default <init>) are included unless include_constructors is False.
"""
from typing import List

from javasample.model import (
    AccessFlag,
    ClassInfo,
    FieldInfo,
    MethodInfo,
    array_type,
    method_descriptor,
    object_type,
    DOUBLE,
    INT,
    LONG,
    VOID,
)

OBJECT = "java/lang/Object"
STRING = "java/lang/String"
ITERABLE = "java/lang/Iterable"
ITERATOR = "java/util/Iterator"

DEFAULT_CONSTRUCTOR = "<init>"


def _default_constructor(class_access) -> MethodInfo:
    # a default constructor takes the access of its class
    access = {f for f in class_access if f in (AccessFlag.PUBLIC, AccessFlag.PROTECTED, AccessFlag.PRIVATE)}
    return MethodInfo(name=DEFAULT_CONSTRUCTOR, descriptor=method_descriptor([], VOID), access=access)


def build_test_class(include_constructors: bool = True) -> ClassInfo:
    access = {AccessFlag.PUBLIC}
    test = ClassInfo(name="Test", super_name=OBJECT, access=access)

    test.fields = [
        FieldInfo(name="a", descriptor=INT, access={AccessFlag.PRIVATE}),
        FieldInfo(name="b", descriptor=LONG, access={AccessFlag.PRIVATE, AccessFlag.STATIC}),
        FieldInfo(name="c", descriptor=object_type(STRING), access={AccessFlag.PRIVATE}),
    ]

    methods = []
    if include_constructors:
        methods.append(_default_constructor(access))
    methods.append(MethodInfo(
        name="add",
        descriptor=method_descriptor([INT, LONG], DOUBLE),
        access={AccessFlag.PROTECTED, AccessFlag.STATIC},
    ))
    methods.append(MethodInfo(
        name="main",
        descriptor=method_descriptor([array_type(object_type(STRING))], VOID),
        access={AccessFlag.PUBLIC, AccessFlag.STATIC},
    ))
    test.methods = methods
    test.inner_classes = ["Test$A"]
    return test


def build_iterable_class(include_constructors: bool = True) -> ClassInfo:
    access = {AccessFlag.STATIC}
    inner = ClassInfo(name="Test$A", super_name=OBJECT, interfaces=[ITERABLE], access=access)

    if include_constructors:
        inner.methods.append(_default_constructor(access))
    inner.methods.append(MethodInfo(
        name="iterator",
        descriptor=method_descriptor([], object_type(ITERATOR)),
        access={AccessFlag.PUBLIC},
    ))
    return inner


def build_test2_class(include_constructors: bool = True) -> ClassInfo:
    test2 = ClassInfo(name="Test2", super_name=OBJECT, access=set())

    if include_constructors:
        test2.methods.append(_default_constructor(test2.access))
    test2.methods.extend([
        MethodInfo(name="a", descriptor=method_descriptor([], VOID), access={AccessFlag.PUBLIC}),
        MethodInfo(name="b", descriptor=method_descriptor([], INT), access={AccessFlag.PRIVATE}),
        MethodInfo(
            name="c",
            descriptor=method_descriptor([object_type(OBJECT)], object_type(STRING)),
            access={AccessFlag.PROTECTED, AccessFlag.STATIC},
        ),
    ])
    return test2


def build_sample_classes(include_constructors: bool = True) -> List[ClassInfo]:
    """All classes of the sample source, outer classes before their inner classes."""
    return [
        build_test_class(include_constructors),
        build_iterable_class(include_constructors),
        build_test2_class(include_constructors),
    ]
