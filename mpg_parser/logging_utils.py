from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

from .model import Graph, Numa, Wedge

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if isinstance(value, Graph):
        if not value.edges:
            return "Graph(edges=0)"
        spans = ", ".join(f"{a}-{b}" for a, b in sorted(value.spans())[:max_items])
        more = ", ..." if len(value) > max_items else ""
        return f"Graph(edges={len(value)}, weight={value.total_weight:.6g}, spans=[{spans}{more}])"

    if isinstance(value, Wedge):
        return f"Wedge({value.left.ordinal}-{value.right.ordinal}, {value.weight:.6g})"

    if isinstance(value, Numa):
        return f"Numa({value.ordinal}, {_repr.repr(value.item)})"

    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if 0 < value.size <= max_items:
            parts.append(f"values={_repr.repr(value.tolist())}")
        elif value.size > max_items and np.issubdtype(value.dtype, np.number):
            parts.append(f"min={float(value.min()):.6g}")
            parts.append(f"max={float(value.max()):.6g}")
        return ", ".join(parts)

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append(f"... ({len(value)} total)")
                break
            items.append(_safe_repr(item))
        return f"{open_br}{', '.join(items)}{close_br}"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - depends on caller objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


_TRACED = "_debug_logging_wrapped"


def _format_call(label: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [_safe_repr(arg) for arg in args]
    rendered.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return f"{label}({', '.join(rendered)})"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs each call of the wrapped function at DEBUG.

    One record is written when the call starts (``call label(args)``) and one
    when it returns (``label -> result``) or raises (``label raised ...``).
    While DEBUG is disabled for ``logger`` the call goes straight through.
    """

    def decorator(func: F) -> F:
        if getattr(func, _TRACED, False):
            return func

        label = name or getattr(func, "__qualname__", None) or getattr(func, "__name__", "<callable>")

        @wraps(func)
        def traced(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("call %s", _format_call(label, args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s", label, _safe_repr(exc))
                raise
            logger.debug("%s -> %s", label, _safe_repr(result) if log_result else "done")
            return result

        setattr(traced, _TRACED, True)
        return cast(F, traced)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the module-level functions defined in ``namespace`` with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):  # pragma: no cover - always set for real modules
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
