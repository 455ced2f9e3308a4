from __future__ import annotations

from typing import Any


class PreludeError(Exception):
    """Base class for programming errors detected by neoprelude."""


class NotSteppableError(PreludeError, TypeError):
    """Raised when a generator yields a value the interpreter cannot drive."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Cannot interpret yielded value: {value!r}\n"
            f"Hint: yield an Either, Ior, Maybe, Validation or Annotation, "
            f"or an object with a `to_step()` method"
        )


class NotASemigroupError(PreludeError, TypeError):
    """Raised when `cmb` has no combination registered for a value's type."""

    def __init__(self, lhs: Any, rhs: Any) -> None:
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(
            f"Cannot combine {type(lhs).__name__} with {type(rhs).__name__}\n"
            f"Hint: implement a `cmb(self, other)` method or register the type "
            f"with `neoprelude.cmb.cmb.register`"
        )


class UnwrapError(PreludeError, ValueError):
    """Raised when a value is unwrapped from the wrong variant."""

    def __init__(self, value: Any, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(
            f"Expected {expected}, found {value!r}\n"
            f"Hint: use `match(...)` or `get_or(...)` to handle every variant"
        )


__all__ = ["NotASemigroupError", "NotSteppableError", "PreludeError", "UnwrapError"]
