"""
lazyq: lazily evaluated, linq-style sequence operators.

    from lazyq import P
    P(range(100)).where(lambda x: x % 3 == 0).skip(2).take(5).to.list()

operators are available as methods on Enumerable (and its .set / .to
accessors) or as free functions in lazyq.operators.
"""
import logging

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    lazyq,
    P,
)

# expose the error taxonomy
from .errors import (
    SequenceError,
    InvalidArgumentError,
    InvalidOperationError,
    EmptySequenceError,
    CardinalityError,
    PreconditionError,
)

from . import operators
from .log import configure_logging

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazyq",
    "P",
    "SequenceError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "EmptySequenceError",
    "CardinalityError",
    "PreconditionError",
    "operators",
    "configure_logging",
]
