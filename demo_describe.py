#!/usr/bin/env python3
"""
Demo: Describe the sample classes and run the sample.

Prints the structural model (YAML, then JSON), a member summary per class,
and finally the output of Test.main.
"""

from javasample.examples import build_sample_classes
from javasample.model import flags_to_mask
from javasample.program import Test
from javasample.serialization import classes_to_json, classes_to_yaml


def main():
    classes = build_sample_classes()

    print("=" * 80)
    print("SAMPLE CLASSES (YAML)")
    print("=" * 80)
    print(classes_to_yaml(classes))

    print("=" * 80)
    print("SAMPLE CLASSES (JSON)")
    print("=" * 80)
    print(classes_to_json(classes))

    print("\n" + "=" * 80)
    print("MEMBER SUMMARY")
    print("=" * 80)
    for clazz in classes:
        print(f"\n{clazz.name} (access 0x{flags_to_mask(clazz.access):04x})")
        for f in clazz.fields:
            print(f"  field  {f.name:<10} {f.descriptor:<24} 0x{flags_to_mask(f.access):04x}")
        for m in clazz.methods:
            print(f"  method {m.key:<35} 0x{flags_to_mask(m.access):04x}")

    print("\n" + "=" * 80)
    print("Test.main output:")
    Test.main([])
    print("=" * 80)


if __name__ == "__main__":
    main()
