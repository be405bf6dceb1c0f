from __future__ import annotations
import inspect
from typing import Any, Callable, Optional, Tuple

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def arity_of(f: Callable[..., Any]) -> int:
    """Number of required positional parameters of ``f``."""
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError) as ex:
        raise TypeError(f"cannot infer arity of {f!r}; pass arity= explicitly") from ex
    params = list(sig.parameters.values())
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        raise TypeError(f"cannot infer arity of variadic {f!r}; pass arity= explicitly")
    return sum(1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)


def curry(f: Callable[..., Any], arity: Optional[int] = None) -> Callable[[Any], Any]:
    """Turn ``f(a, b, c)`` into ``f(a)(b)(c)``.

    Record constructors lifted with ``pure(curry(Record))`` take one field per
    ``with_validation`` step. Arity 0 or 1 returns ``f`` unchanged.
    """
    n = arity_of(f) if arity is None else arity
    if n < 0:
        raise ValueError("arity must be >= 0")
    if n <= 1:
        return f

    def step(collected: Tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(x: Any) -> Any:
            args = collected + (x,)
            if len(args) == n:
                return f(*args)
            return step(args)
        return take

    return step(())
