"""
Java Sample Program Package

A Python rendition of a small Java sample class (``Test``) and its companion
(``Test2``), together with a read-only structural model of those classes.

LAYOUT:
-------
    numeric        fixed-width integer rules (int, long, double widening)
    program        the runnable sample: Test, Test.A, Test2, Test.main
    model          structural model: access flags, descriptors, classes
    examples       the structural model of the sample, built by hand
    reader         the structural model read from class-file bytes
    serialization  dict / JSON / YAML conversion of the structural model

The runnable program and the structural model are independent.
Nothing in ``model`` executes code; nothing in ``program`` reads the model.
"""

__version__ = "0.1.0"
