from .validation import (
    Validation,
    Success,
    Failure,
    pure,
    from_result,
    from_maybe,
    apply_or_collect,
    map_,
    map_n,
    map2,
    map3,
    map4,
    map5,
    map6,
    map7,
    with_validation,
    and_then,
    sequence,
    traverse,
    map_error,
    to_maybe,
    extract,
)
from .result import Result, Ok, Err
from .option import Option, Some, NONE, from_nullable
from .semigroup import list_concat, dict_union, concat
from .curry import curry, arity_of
from .logger import ConsoleLogger
