"""
Test the hand-built structural model of the sample source.

Validates declared modifiers and descriptors, and that the model agrees
with the runnable Python classes.
"""

from javasample import program
from javasample.examples import build_sample_classes
from javasample.model import AccessFlag


def _by_name(classes):
    return {c.name: c for c in classes}


def test_sample_class_names():
    classes = build_sample_classes()
    assert [c.name for c in classes] == ["Test", "Test$A", "Test2"]


def test_test_class_structure():
    test = _by_name(build_sample_classes())["Test"]

    assert test.access == {AccessFlag.PUBLIC}
    assert test.inner_classes == ["Test$A"]

    # Fields a, b, c
    assert [f.name for f in test.fields] == ["a", "b", "c"]
    assert test.get_field("a").descriptor == "I"
    assert test.get_field("b").is_static
    assert test.get_field("b").descriptor == "J"
    assert test.get_field("c").descriptor == "Ljava/lang/String;"

    add = test.get_method("add")
    assert add.descriptor == "(IJ)D"
    assert add.access == {AccessFlag.PROTECTED, AccessFlag.STATIC}

    main = test.get_method("main")
    assert main.key == "main([Ljava/lang/String;)V"
    assert main.access == {AccessFlag.PUBLIC, AccessFlag.STATIC}


def test_nested_class_implements_iterable():
    inner = _by_name(build_sample_classes())["Test$A"]
    assert inner.simple_name == "A"
    assert inner.interfaces == ["java/lang/Iterable"]
    assert inner.get_method("iterator").return_type == "Ljava/util/Iterator;"


def test_test2_structure():
    test2 = _by_name(build_sample_classes())["Test2"]
    assert test2.access == set()
    assert test2.get_method("a").access == {AccessFlag.PUBLIC}
    assert test2.get_method("b").access == {AccessFlag.PRIVATE}
    assert test2.get_method("b").return_type == "I"
    assert test2.get_method("c").descriptor == "(Ljava/lang/Object;)Ljava/lang/String;"


def test_default_constructors():
    classes = _by_name(build_sample_classes())
    assert classes["Test"].get_method("<init>", "()V").access == {AccessFlag.PUBLIC}
    assert classes["Test$A"].get_method("<init>").access == set()
    assert classes["Test2"].get_method("<init>") is not None


def test_without_constructors():
    for clazz in build_sample_classes(include_constructors=False):
        assert clazz.get_method("<init>") is None


def test_model_matches_python_classes():
    """Every modelled method and static field exists on the Python class."""
    python_classes = {
        "Test": program.Test,
        "Test$A": program.Test.A,
        "Test2": program.Test2,
    }
    for clazz in build_sample_classes(include_constructors=False):
        target = python_classes[clazz.name]
        for method in clazz.methods:
            # private members carry a leading underscore on the Python side
            attr = "_" + method.name if AccessFlag.PRIVATE in method.access else method.name
            assert callable(getattr(target, attr)), f"{clazz.name}.{attr}"
            if method.is_static:
                assert isinstance(target.__dict__[attr], staticmethod)
        for f in clazz.fields:
            if f.is_static:
                assert hasattr(target, f.name)


def test_builder_returns_fresh_objects():
    first = build_sample_classes()
    second = build_sample_classes()
    first[0].fields.clear()
    assert len(second[0].fields) == 3
