"""Callback arity adaptation.

Iterator callbacks are documented as receiving ``(value, key, collection)``,
but most callers pass a one-argument lambda or a builtin. Callbacks are
therefore invoked with only as many leading positional arguments as they
declare.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_arity(func: Callable[..., Any], max_args: int, fallback: int = 1) -> int:
    """Count how many positional arguments func accepts, capped at max_args.

    Args:
        func: Callable to inspect.
        max_args: Number of arguments the caller has on offer.
        fallback: Count used when func has no introspectable signature.

    Returns:
        Number of leading positional arguments to pass.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return min(fallback, max_args)

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return max_args
        if param.kind in _POSITIONAL:
            count += 1
    return min(count, max_args)


def adapt(func: Callable[..., Any], max_args: int, fallback: int = 1) -> Callable[..., Any]:
    """Wrap func so it can be called with max_args positional arguments.

    Surplus trailing arguments are dropped. Arity is computed once, so the
    returned callable is cheap to invoke per element.

    Args:
        func: Callback supplied by the caller.
        max_args: Number of arguments the traversal will pass.
        fallback: Arity assumed for callables without a signature.

    Returns:
        Callable accepting exactly max_args positional arguments.
    """
    arity = positional_arity(func, max_args, fallback)
    if arity == max_args:
        return func

    def adapted(*args: Any) -> Any:
        return func(*args[:arity])

    return adapted
