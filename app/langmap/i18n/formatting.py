"""Value stringification for translation parameters.

Parameter values of any type are rendered to text before they are
substituted into a template. Scalars render in their natural form,
containers render their contents:

    stringify("text")          -> "text"
    stringify(True)            -> "true"
    stringify(19.99)           -> "19.99"
    stringify(3.0)             -> "3"
    stringify(None)            -> "<nil>"
    stringify([1, 2, 3])       -> "[1 2 3]"
    stringify({"a": 1})        -> "map[a:1]"
    stringify(User("Al", 30))  -> "{name:Al age:30}"
"""

import dataclasses
import math
from collections.abc import Mapping
from decimal import Decimal
from functools import singledispatch
from typing import Any, Iterable, Tuple

from pydantic import BaseModel

NIL = "<nil>"

# Floats below 1e21 render positionally, larger ones in exponent notation
FLOAT_EXPONENT_THRESHOLD = 21


def _join(items: Iterable[Any]) -> str:
    return " ".join(stringify(item) for item in items)


def _record(fields: Iterable[Tuple[str, Any]]) -> str:
    return "{" + " ".join(f"{name}:{stringify(value)}" for name, value in fields) + "}"


@singledispatch
def stringify(value: Any) -> str:
    """Render a parameter value as text.

    Dataclass instances render as records; everything without a dedicated
    rendering falls back to ``str()``.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _record(
            (field.name, getattr(value, field.name))
            for field in dataclasses.fields(value)
        )
    return str(value)


@stringify.register(str)
def _stringify_str(value: str) -> str:
    return value


@stringify.register(type(None))
def _stringify_none(value: None) -> str:
    return NIL


@stringify.register(bool)
def _stringify_bool(value: bool) -> str:
    return "true" if value else "false"


@stringify.register(int)
def _stringify_int(value: int) -> str:
    return str(int(value))


@stringify.register(float)
def _stringify_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = repr(float(value))
    if "e" in text:
        exponent = int(text.split("e")[1])
        if 0 <= exponent < FLOAT_EXPONENT_THRESHOLD:
            return format(Decimal(text), "f")
        return text

    if text.endswith(".0"):
        return text[:-2]
    return text


@stringify.register(list)
def _stringify_list(value: list) -> str:
    return f"[{_join(value)}]"


@stringify.register(tuple)
def _stringify_tuple(value: tuple) -> str:
    # Named tuples are records
    fields = getattr(value, "_fields", None)
    if fields:
        return _record(zip(fields, value))
    return f"[{_join(value)}]"


@stringify.register(set)
@stringify.register(frozenset)
def _stringify_set(value) -> str:
    return "[" + " ".join(sorted(stringify(item) for item in value)) + "]"


@stringify.register(bytes)
@stringify.register(bytearray)
def _stringify_bytes(value) -> str:
    return f"[{_join(value)}]"


@stringify.register(Mapping)
def _stringify_mapping(value: Mapping) -> str:
    items = list(value.items())
    try:
        items.sort(key=lambda item: item[0])
    except TypeError:
        pass  # mixed key types keep insertion order
    return "map[" + " ".join(f"{stringify(k)}:{stringify(v)}" for k, v in items) + "]"


@stringify.register(BaseModel)
def _stringify_model(value: BaseModel) -> str:
    return _record((name, getattr(value, name)) for name in type(value).model_fields)


@stringify.register(BaseException)
def _stringify_exception(value: BaseException) -> str:
    return str(value)
