from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar, Union

from .curry import curry
from .option import NONE, Option, Some, as_option
from .result import Err, Ok, Result
from .semigroup import list_concat

E = TypeVar("E")
F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

Merge = Callable[[Any, Any], Any]


class Validation(Generic[E, A]):
    """Either a validated value (``Success``) or an error payload (``Failure``).

    Accumulating combinators merge the payloads of two failures with a
    caller-supplied function; ``and_then`` stops at the first failure.
    """

    def is_success(self) -> bool: raise NotImplementedError
    def is_failure(self) -> bool: return not self.is_success()

    def map(self, f: Callable[[A], B]) -> "Validation[E, B]":
        if self.is_success():
            return Success(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_error(self, f: Callable[[E], F]) -> "Validation[F, A]":
        if self.is_failure():
            return Failure(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], "Validation[E, B]"]) -> "Validation[E, B]":
        if self.is_success():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def apply(self, arg: "Validation[E, Any]", merge: Merge = list_concat) -> "Validation[E, Any]":
        # self holds the function; chains read left to right
        return apply_or_collect(merge, self, arg)

    def fold(self, on_failure: Callable[[E], C], on_success: Callable[[A], C]) -> C:
        if self.is_success():
            return on_success(self.value)  # type: ignore[attr-defined]
        return on_failure(self.error)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_success() else default  # type: ignore[attr-defined]

    def to_result(self) -> Result[E, A]:
        if self.is_success():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(self.error)  # type: ignore[attr-defined]

    def to_option(self) -> Option[A]:
        if self.is_success():
            return Some(self.value)  # type: ignore[attr-defined]
        return NONE  # type: ignore[return-value]


@dataclass(frozen=True)
class Success(Validation[E, A]):
    value: A
    def is_success(self) -> bool: return True


@dataclass(frozen=True)
class Failure(Validation[E, A]):
    error: E
    def is_success(self) -> bool: return False


# -- construction ----------------------------------------------------------

def pure(value: A) -> Validation[Any, A]:
    return Success(value)


def from_result(r: Result[E, A]) -> Validation[E, A]:
    if r.is_ok():
        return Success(r.value)  # type: ignore[attr-defined]
    return Failure(r.error)  # type: ignore[attr-defined]


def from_maybe(opt: Union[Option[A], Optional[A]], error_if_absent: E) -> Validation[E, A]:
    """``Some(x)`` (or a non-None value) succeeds; absence fails with ``error_if_absent`` as given."""
    o = as_option(opt)
    if o.is_some():
        return Success(o.value)  # type: ignore[attr-defined]
    return Failure(error_if_absent)


# -- core ------------------------------------------------------------------

def apply_or_collect(
    merge: Callable[[E, E], E],
    fun_val: Validation[E, Callable[[A], B]],
    arg_val: Validation[E, A],
) -> Validation[E, B]:
    """Apply a validated function to a validated argument.

    When both sides fail the errors are combined with ``merge(fun_err, arg_err)``.
    When only one side fails its error is returned untouched and ``merge`` is
    not called.
    """
    if fun_val.is_failure() and arg_val.is_failure():
        return Failure(merge(fun_val.error, arg_val.error))  # type: ignore[attr-defined]
    if fun_val.is_failure():
        return fun_val  # type: ignore[return-value]
    if arg_val.is_failure():
        return arg_val  # type: ignore[return-value]
    return Success(fun_val.value(arg_val.value))  # type: ignore[attr-defined]


# -- mapping family --------------------------------------------------------

def map_(f: Callable[[A], B], v: Validation[E, A]) -> Validation[E, B]:
    return v.map(f)


def map_n(f: Callable[..., B], *vs: Validation[Any, Any], merge: Merge = list_concat) -> Validation[Any, B]:
    """Lift an N-ary ``f`` over N validations, accumulating every error.

    Errors of the failing inputs are merged in argument order.
    """
    if not vs:
        raise TypeError("map_n() needs at least one validation")
    acc: Validation[Any, Any] = vs[0].map(curry(f, len(vs)))
    for v in vs[1:]:
        acc = apply_or_collect(merge, acc, v)
    return acc


def map2(f: Callable[[Any, Any], B], v1: Validation[Any, Any], v2: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2)


def map3(f: Callable[..., B], v1: Validation[Any, Any], v2: Validation[Any, Any], v3: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2, v3)


def map4(f: Callable[..., B], v1: Validation[Any, Any], v2: Validation[Any, Any], v3: Validation[Any, Any],
         v4: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2, v3, v4)


def map5(f: Callable[..., B], v1: Validation[Any, Any], v2: Validation[Any, Any], v3: Validation[Any, Any],
         v4: Validation[Any, Any], v5: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2, v3, v4, v5)


def map6(f: Callable[..., B], v1: Validation[Any, Any], v2: Validation[Any, Any], v3: Validation[Any, Any],
         v4: Validation[Any, Any], v5: Validation[Any, Any], v6: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2, v3, v4, v5, v6)


def map7(f: Callable[..., B], v1: Validation[Any, Any], v2: Validation[Any, Any], v3: Validation[Any, Any],
         v4: Validation[Any, Any], v5: Validation[Any, Any], v6: Validation[Any, Any],
         v7: Validation[Any, Any]) -> Validation[Any, B]:
    return map_n(f, v1, v2, v3, v4, v5, v6, v7)


# -- sequencing ------------------------------------------------------------

def with_validation(
    arg_val: Validation[E, A],
    fun_val: Validation[E, Callable[[A], B]],
    merge: Merge = list_concat,
) -> Validation[E, B]:
    """``apply_or_collect`` with the arguments flipped.

    Start from ``pure(curry(Record))`` and feed one field per call; every
    failing field's errors end up in the result, in call order.
    """
    return apply_or_collect(merge, fun_val, arg_val)


def and_then(f: Callable[[A], Validation[E, B]], v: Validation[E, A]) -> Validation[E, B]:
    # Short-circuits: f never runs on a failure
    return v.and_then(f)


def sequence(vs: Iterable[Validation[Any, A]], merge: Merge = list_concat) -> Validation[Any, List[A]]:
    acc: Validation[Any, List[A]] = Success([])
    for v in vs:
        acc = apply_or_collect(merge, acc.map(lambda xs: lambda x: [*xs, x]), v)
    return acc


def traverse(f: Callable[[Any], Validation[Any, A]], xs: Iterable[Any], merge: Merge = list_concat) -> Validation[Any, List[A]]:
    return sequence((f(x) for x in xs), merge=merge)


# -- adaptation and extraction ---------------------------------------------

def map_error(f: Callable[[E], F], v: Validation[E, A]) -> Validation[F, A]:
    return v.map_error(f)


def to_maybe(v: Validation[Any, A]) -> Option[A]:
    return v.to_option()


def extract(v: Validation[E, A]) -> Result[E, A]:
    return v.to_result()
