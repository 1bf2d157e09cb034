"""
Tests for the structural model.

These tests verify:
    - Access flag packing and unpacking
    - Descriptor building and parsing
    - Field, method and class lookups
"""

import pytest
from javasample.model import (
    AccessFlag,
    ClassInfo,
    DescriptorError,
    FieldInfo,
    MethodInfo,
    array_type,
    flags_to_mask,
    mask_to_flags,
    method_descriptor,
    object_type,
    parse_field_descriptor,
    parse_method_descriptor,
)


class TestAccessFlags:
    """Test AccessFlag bit masks."""

    def test_class_file_values(self):
        assert AccessFlag.PUBLIC.value == 0x0001
        assert AccessFlag.STATIC.value == 0x0008
        assert AccessFlag.INTERFACE.value == 0x0200
        assert AccessFlag.ENUM.value == 0x4000

    def test_pack(self):
        """public static main packs to 0x0009."""
        assert flags_to_mask({AccessFlag.PUBLIC, AccessFlag.STATIC}) == 0x0009

    def test_pack_empty(self):
        assert flags_to_mask([]) == 0

    def test_unpack(self):
        assert mask_to_flags(0x000C) == {AccessFlag.PROTECTED, AccessFlag.STATIC}

    def test_unknown_bits_ignored(self):
        assert mask_to_flags(0x0001 | 0x8000) == {AccessFlag.PUBLIC}

    def test_pack_unpack_all(self):
        every = set(AccessFlag)
        assert mask_to_flags(flags_to_mask(every)) == every


class TestDescriptors:
    """Test descriptor helpers."""

    def test_object_type(self):
        assert object_type("java/lang/String") == "Ljava/lang/String;"

    def test_array_type(self):
        assert array_type(object_type("java/lang/String")) == "[Ljava/lang/String;"

    def test_method_descriptor(self):
        assert method_descriptor(["I", "J"], "D") == "(IJ)D"
        assert method_descriptor([], "V") == "()V"

    def test_parse_add(self):
        assert parse_method_descriptor("(IJ)D") == (["I", "J"], "D")

    def test_parse_main(self):
        params, ret = parse_method_descriptor("([Ljava/lang/String;)V")
        assert params == ["[Ljava/lang/String;"]
        assert ret == "V"

    def test_parse_mixed(self):
        params, ret = parse_method_descriptor("(Ljava/lang/Object;[[IZ)Ljava/lang/String;")
        assert params == ["Ljava/lang/Object;", "[[I", "Z"]
        assert ret == "Ljava/lang/String;"

    def test_field_descriptor(self):
        assert parse_field_descriptor("J") == "J"
        assert parse_field_descriptor("Ljava/lang/String;") == "Ljava/lang/String;"

    @pytest.mark.parametrize("bad", ["IJ)D", "(IJ", "(Q)V", "(Ljava/lang/String)V", "(L;)V", "()", "()VV"])
    def test_malformed_method_descriptor(self, bad):
        with pytest.raises(DescriptorError):
            parse_method_descriptor(bad)

    def test_void_not_a_field_type(self):
        with pytest.raises(DescriptorError):
            parse_field_descriptor("V")

    def test_trailing_characters(self):
        with pytest.raises(DescriptorError):
            parse_field_descriptor("II")


class TestMembers:
    """Test FieldInfo and MethodInfo."""

    def test_field_defaults(self):
        f = FieldInfo(name="a", descriptor="I")
        assert f.access == set()
        assert not f.is_static

    def test_static_field(self):
        f = FieldInfo(name="b", descriptor="J", access={AccessFlag.PRIVATE, AccessFlag.STATIC})
        assert f.is_static

    def test_method_key(self):
        m = MethodInfo(name="add", descriptor="(IJ)D")
        assert m.key == "add(IJ)D"

    def test_method_signature_parts(self):
        m = MethodInfo(name="add", descriptor="(IJ)D", access={AccessFlag.STATIC})
        assert m.parameter_types == ["I", "J"]
        assert m.return_type == "D"
        assert m.is_static


class TestClassInfo:
    """Test ClassInfo lookups."""

    def _build(self) -> ClassInfo:
        return ClassInfo(
            name="Test",
            access={AccessFlag.PUBLIC},
            fields=[FieldInfo(name="a", descriptor="I")],
            methods=[
                MethodInfo(name="m", descriptor="()V"),
                MethodInfo(name="m", descriptor="(I)V"),
            ],
        )

    def test_defaults(self):
        c = ClassInfo(name="Empty")
        assert c.super_name == "java/lang/Object"
        assert c.interfaces == []
        assert c.fields == []
        assert c.methods == []
        assert c.inner_classes == []

    def test_get_field(self):
        c = self._build()
        assert c.get_field("a").descriptor == "I"
        assert c.get_field("missing") is None

    def test_get_method_first_by_name(self):
        c = self._build()
        assert c.get_method("m").descriptor == "()V"

    def test_get_method_by_descriptor(self):
        c = self._build()
        assert c.get_method("m", "(I)V").descriptor == "(I)V"
        assert c.get_method("m", "(J)V") is None

    def test_method_keys(self):
        assert self._build().method_keys() == ["m()V", "m(I)V"]

    def test_simple_name(self):
        assert ClassInfo(name="Test$A").simple_name == "A"
        assert ClassInfo(name="java/lang/Object").simple_name == "Object"

    def test_is_interface(self):
        assert ClassInfo(name="I", access={AccessFlag.INTERFACE, AccessFlag.ABSTRACT}).is_interface
        assert not self._build().is_interface
