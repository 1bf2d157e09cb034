"""
Serialization helpers for the structural model (ClassInfo, FieldInfo, MethodInfo).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Access flags are written as sorted lowercase names, e.g. ["protected", "static"].
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Set

import yaml

from javasample.model import AccessFlag, ClassInfo, FieldInfo, MethodInfo


def access_to_list(flags: Iterable[AccessFlag]) -> List[str]:
    return sorted(flag.name.lower() for flag in flags)


def access_from_list(names: Iterable[str] | None) -> Set[AccessFlag]:
    if names is None:
        return set()
    flags = set()
    for name in names:
        try:
            flags.add(AccessFlag[name.upper()])
        except KeyError:
            raise ValueError(f"Unknown access flag: {name!r}") from None
    return flags


def field_to_dict(f: FieldInfo) -> Dict[str, Any]:
    if not isinstance(f, FieldInfo):
        raise TypeError(f"Unsupported field model type: {type(f)}")
    return {"name": f.name, "descriptor": f.descriptor, "access": access_to_list(f.access)}


def field_from_dict(d: Dict[str, Any]) -> FieldInfo:
    return FieldInfo(name=d["name"], descriptor=d["descriptor"], access=access_from_list(d.get("access")))


def method_to_dict(m: MethodInfo) -> Dict[str, Any]:
    if not isinstance(m, MethodInfo):
        raise TypeError(f"Unsupported method model type: {type(m)}")
    return {"name": m.name, "descriptor": m.descriptor, "access": access_to_list(m.access)}


def method_from_dict(d: Dict[str, Any]) -> MethodInfo:
    return MethodInfo(name=d["name"], descriptor=d["descriptor"], access=access_from_list(d.get("access")))


def class_to_dict(c: ClassInfo) -> Dict[str, Any]:
    if not isinstance(c, ClassInfo):
        raise TypeError(f"Unsupported class model type: {type(c)}")
    return {
        "name": c.name,
        "super_name": c.super_name,
        "interfaces": list(c.interfaces),
        "access": access_to_list(c.access),
        "fields": [field_to_dict(f) for f in c.fields],
        "methods": [method_to_dict(m) for m in c.methods],
        "inner_classes": list(c.inner_classes),
    }


def class_from_dict(d: Dict[str, Any]) -> ClassInfo:
    return ClassInfo(
        name=d["name"],
        super_name=d.get("super_name"),
        interfaces=list(d.get("interfaces", [])),
        access=access_from_list(d.get("access")),
        fields=[field_from_dict(f) for f in d.get("fields", [])],
        methods=[method_from_dict(m) for m in d.get("methods", [])],
        inner_classes=list(d.get("inner_classes", [])),
    )


def classes_to_dict(classes: List[ClassInfo]) -> Dict[str, Any]:
    return {"classes": [class_to_dict(c) for c in classes]}


def classes_from_dict(d: Dict[str, Any] | None) -> List[ClassInfo]:
    # an empty document has no classes
    if d is None:
        return []
    return [class_from_dict(c) for c in d.get("classes", [])]


def classes_to_json(classes: List[ClassInfo]) -> str:
    return json.dumps(classes_to_dict(classes), sort_keys=True)


def classes_from_json(s: str) -> List[ClassInfo]:
    d = json.loads(s)
    return classes_from_dict(d)


def classes_to_yaml(classes: List[ClassInfo]) -> str:
    return yaml.safe_dump(classes_to_dict(classes), sort_keys=False)


def classes_from_yaml(s: str) -> List[ClassInfo]:
    d = yaml.safe_load(s)
    return classes_from_dict(d)
