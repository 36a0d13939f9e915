"""Operation and parameter descriptors for controller classes.

The compiler never inspects classes itself. It consumes ``Operation``
descriptors, which ``describe_operations()`` builds from a class with
``inspect``. Any other source (a static registry, generated code) can
produce the same descriptors.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union, get_args, get_origin

# Parameter kinds that can never map to a single URL segment
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

# Builtin names recognized in unevaluated string annotations
_BUILTIN_NAMES = frozenset(
    {"bool", "bytes", "complex", "dict", "float", "frozenset", "int", "list", "object", "set", "str", "tuple"}
)


@dataclass(frozen=True, slots=True)
class Parameter:
    """One parameter of an operation.

    ``type_name`` is the qualified name of the declared type
    (``"myapp.models.User"``), the bare name for builtins (``"int"``),
    or ``None`` when the parameter is unannotated.
    """

    name: str
    type_name: str | None = None
    has_default: bool = False
    builtin: bool = False

    @property
    def type_basename(self) -> str | None:
        """Last dotted component of ``type_name``."""
        if self.type_name is None:
            return None
        return self.type_name.rpartition(".")[2]


@dataclass(frozen=True, slots=True)
class Operation:
    """A public callable on a controller class, candidate for a route."""

    name: str
    parameters: tuple[Parameter, ...] = ()
    public: bool = True


def describe_operations(cls: type) -> tuple[Operation, ...]:
    """Describe every public operation of *cls*, inherited ones included.

    Operations come back sorted by name. Names starting with ``_`` are
    not public and are skipped.
    """
    operations: list[Operation] = []
    for name in sorted(dir(cls)):
        if name.startswith("_"):
            continue
        static = inspect.getattr_static(cls, name)
        if isinstance(static, staticmethod | classmethod):
            func = static.__func__
            bound = isinstance(static, classmethod)
        elif inspect.isfunction(static):
            func = static
            bound = True
        else:
            continue
        operations.append(Operation(name=name, parameters=describe_parameters(func, bound=bound)))
    return tuple(operations)


def describe_parameters(func: Callable[..., Any], *, bound: bool = False) -> tuple[Parameter, ...]:
    """Describe the parameters of *func* in declaration order.

    With *bound* set, the first parameter (``self`` / ``cls``) is dropped.
    ``*args`` and ``**kwargs`` are omitted.
    """
    sig = _signature(func)
    params = list(sig.parameters.values())
    if bound and params and params[0].kind not in _VARIADIC:
        params = params[1:]

    described: list[Parameter] = []
    for param in params:
        if param.kind in _VARIADIC:
            continue
        type_name, builtin = _type_name(param.annotation)
        described.append(
            Parameter(
                name=param.name,
                type_name=type_name,
                has_default=param.default is not inspect.Parameter.empty,
                builtin=builtin,
            )
        )
    return tuple(described)


def _signature(func: Callable[..., Any]) -> inspect.Signature:
    """Signature with string annotations evaluated where possible."""
    try:
        return inspect.signature(func, eval_str=True)
    except NameError:
        # Forward reference to a name not importable here; keep the text
        return inspect.signature(func)


def _type_name(annotation: Any) -> tuple[str | None, bool]:
    """Return ``(qualified_name, is_builtin)`` for a parameter annotation."""
    if annotation is inspect.Parameter.empty:
        return None, False

    if isinstance(annotation, str):
        name = annotation.strip().removesuffix("| None").strip()
        return name, "." not in name and name in _BUILTIN_NAMES

    annotation = _unwrap_optional(annotation)
    if not isinstance(annotation, type):
        # Generic aliases (list[int]) and other typing constructs
        origin = get_origin(annotation)
        if isinstance(origin, type):
            annotation = origin
        else:
            return None, False

    module = annotation.__module__
    if module == "builtins":
        return annotation.__qualname__, True
    return f"{module}.{annotation.__qualname__}", False


def _unwrap_optional(annotation: Any) -> Any:
    """Extract ``X`` from ``X | None`` or ``Optional[X]``."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation

