"""
The runnable sample program.

Two classes, as declared in the sample source:

    Test
        fields : a (int), b (static long), c (String)
        A      : nested class, Iterable<String> with an empty iterator
        add    : protected static double add(int a, long b)
        main   : public static void main(String[] args)

    Test2
        a : public void a()
        b : private int b()
        c : protected static String c(Object o)

BEHAVIOR NOTE:
    In Java, A.iterator() returns null and any traversal of it fails.
    Here it returns an empty iterator instead. Everything else is literal.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional

from javasample.numeric import as_int, as_long, long_add, wrap_long, to_double

logger = logging.getLogger("javasample.program")

# Fixed inputs of Test.main
ADD_INT_ARG = 10
ADD_LONG_ARG = 20
EXPECTED_SUM = 30.0
ACCUMULATOR_VALUE = 10


class TextIterable(ABC):
    """
    The iteration capability: something that can produce a sequence of text.

    One required operation, iterator(). Iterating the object itself
    delegates to it, so every TextIterable is also a Python iterable.
    """

    @abstractmethod
    def iterator(self) -> Iterator[str]:
        """Return a fresh traversal producer over the text values."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[str]:
        return self.iterator()


@dataclass
class Test:
    """
    The sample's main class.

    Instance fields a and c, and the static field b, are declared but
    never read or written by main().
    """

    a: int = 0
    c: Optional[str] = None
    b: ClassVar[int] = 0

    class A(TextIterable):
        """Stub iteration capability. Produces no values."""

        def iterator(self) -> Iterator[str]:
            return iter(())

    @staticmethod
    def add(a: int, b: int) -> float:
        """
        Add an int and a long, widened to double.

        Args:
            a: 32-bit integer
            b: 64-bit integer

        Returns:
            a + b as a float (long addition, then widening)

        Raises:
            TypeError: If either argument is not an int
            NumericRangeError: If an argument does not fit its width
        """
        return to_double(wrap_long(as_int(a) + as_long(b)))

    @staticmethod
    def main(args: List[str]) -> None:
        """Entry procedure. Prints twice the accumulator. args is ignored."""
        e = 0

        if Test.add(ADD_INT_ARG, ADD_LONG_ARG) == EXPECTED_SUM:
            logger.debug("add(%d, %d) == %r, accumulator set to %d",
                         ADD_INT_ARG, ADD_LONG_ARG, EXPECTED_SUM, ACCUMULATOR_VALUE)
            e = ACCUMULATOR_VALUE

        i: TextIterable = Test.A()
        i.iterator()
        logger.debug("iterator produced by %s, result discarded", type(i).__qualname__)

        print(long_add(e, e))


class Test2:
    """Companion class from the same source file. Not used by Test."""

    def a(self) -> None:
        pass

    def _b(self) -> int:
        return 1

    @staticmethod
    def c(o: object) -> str:
        return ""


__all__ = ["TextIterable", "Test", "Test2"]
