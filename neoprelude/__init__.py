"""
neoprelude - functional programming essentials for Python.

Typeclass-style helpers for equality, ordering and combination, a family of
sum types (Either, Ior, Validation, Maybe, Annotation) driven by generator
comprehensions, and Eval for stack-safe deferred evaluation.

Example:
    >>> from neoprelude import Either
    >>>
    >>> @Either.wrap_go
    ... def divide(x: int, y: int):
    ...     divisor = yield (Either.left("division by zero") if y == 0 else Either.right(y))
    ...     return x // divisor
    >>>
    >>> divide(10, 2)
    Right(val=5)
    >>> divide(1, 0)
    Left(val='division by zero')
"""

from neoprelude.annotation import Annotation
from neoprelude.builder import (
    Builder,
    DictEntryBuilder,
    DictMergeBuilder,
    FrozenDictEntryBuilder,
    ListConcatBuilder,
    ListIndexBuilder,
    ListPushBuilder,
    ListUnshiftBuilder,
    NoOpBuilder,
    SemigroupBuilder,
    SetUnionBuilder,
    SetValueBuilder,
    StringAppendBuilder,
    StringPrependBuilder,
)
from neoprelude.cmb import Semigroup, cmb, cmb_all, keep_first, keep_last
from neoprelude.cmp import (
    Eq,
    Ord,
    OrdMixin,
    Ordering,
    Reverse,
    clamp,
    cmp,
    eq,
    ge,
    gt,
    icmp,
    ieq,
    le,
    lt,
    ne,
)
from neoprelude.either import Either
from neoprelude.errors import NotASemigroupError, NotSteppableError, PreludeError, UnwrapError
from neoprelude.eval import Eval
from neoprelude.fn import constant, identity, negate_pred, wrap_ctor
from neoprelude.interpreter import (
    interpret,
    interpret_all,
    interpret_async,
    interpret_concurrent,
)
from neoprelude.ior import Ior
from neoprelude.maybe import NOTHING, Just, Maybe, Nothing
from neoprelude.pair import Pair
from neoprelude.step import (
    AuxOnly,
    Both,
    Completed,
    CompletedWithAux,
    FinalOnly,
    Halted,
    Outcome,
    Step,
    Steppable,
    to_step,
)
from neoprelude.validation import Validation

__version__ = "0.1.0"

__all__ = [
    # Sum types
    "Annotation",
    "Either",
    "Eval",
    "Ior",
    "Just",
    "Maybe",
    "NOTHING",
    "Nothing",
    "Pair",
    "Validation",
    # Step protocol
    "AuxOnly",
    "Both",
    "Completed",
    "CompletedWithAux",
    "FinalOnly",
    "Halted",
    "Outcome",
    "Step",
    "Steppable",
    "to_step",
    # Interpreters
    "interpret",
    "interpret_all",
    "interpret_async",
    "interpret_concurrent",
    # Semigroup
    "Semigroup",
    "cmb",
    "cmb_all",
    "keep_first",
    "keep_last",
    # Equality and ordering
    "Eq",
    "Ord",
    "OrdMixin",
    "Ordering",
    "Reverse",
    "clamp",
    "cmp",
    "eq",
    "ge",
    "gt",
    "icmp",
    "ieq",
    "le",
    "lt",
    "ne",
    # Builders
    "Builder",
    "DictEntryBuilder",
    "DictMergeBuilder",
    "FrozenDictEntryBuilder",
    "ListConcatBuilder",
    "ListIndexBuilder",
    "ListPushBuilder",
    "ListUnshiftBuilder",
    "NoOpBuilder",
    "SemigroupBuilder",
    "SetUnionBuilder",
    "SetValueBuilder",
    "StringAppendBuilder",
    "StringPrependBuilder",
    # Functions
    "constant",
    "identity",
    "negate_pred",
    "wrap_ctor",
    # Errors
    "NotASemigroupError",
    "NotSteppableError",
    "PreludeError",
    "UnwrapError",
]
