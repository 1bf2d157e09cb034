"""Run the sample: ``python -m javasample``. Prints ``20``."""

import logging
import sys
from typing import List, Optional

from javasample.program import Test


def run(argv: Optional[List[str]] = None) -> int:
    # stdout is reserved for program output
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    if argv is None:
        argv = sys.argv[1:]
    Test.main(argv)
    return 0


if __name__ == "__main__":
    sys.exit(run())
