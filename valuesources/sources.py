"""Sources that can supply a value: environment variables, files and maps."""

from __future__ import annotations

import json
import math
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

__all__ = [
    "ValueSource",
    "ValueSourceChain",
    "EnvVarValueSource",
    "FileValueSource",
    "MapSource",
    "MapValueSource",
    "env_var",
    "env_vars",
    "file_source",
    "files",
    "format_value",
]


def _quote(text: str) -> str:
    """Return ``text`` as a double-quoted, escaped string literal."""
    return json.dumps(text, ensure_ascii=False)


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, number) < 0 else ""
    if number == 0:
        return sign + "0"

    parts = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    count = len(digits)
    point = count + parts.exponent
    exponent = point - 1

    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"
    if point >= count:
        return sign + digits + "0" * (point - count)
    if point > 0:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    return f"{sign}0.{'0' * -point}{digits}"


def _sorted_items(mapping: Mapping) -> list[tuple[Any, Any]]:
    items = list(mapping.items())
    try:
        return sorted(items, key=lambda item: item[0])
    except TypeError:
        return sorted(items, key=lambda item: format_value(item[0]))


def format_value(value: Any) -> str:
    """Render a value in the plain textual form used for looked-up values."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        inner = " ".join(
            f"{format_value(k)}:{format_value(v)}" for k, v in _sorted_items(value)
        )
        return f"map[{inner}]"
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    return str(value)


class ValueSource(ABC):
    """Something that may provide a string value."""

    @abstractmethod
    def lookup(self) -> str | None:
        """Return the value, or ``None`` if this source has none."""


class ValueSourceChain(ValueSource):
    """An ordered series of sources; the first one that resolves wins."""

    def __init__(self, *args: ValueSource) -> None:
        self.chain: list[ValueSource] = list(args)

    def append(self, other: ValueSourceChain) -> None:
        """Add every source of ``other`` to the end of this chain."""
        self.chain.extend(other.chain)

    def env_keys(self) -> list[str]:
        """Return the keys of the environment variable sources in the chain."""
        keys = []
        for source in self.chain:
            is_from_env = getattr(source, "is_from_env", None)
            if callable(is_from_env) and is_from_env():
                keys.append(source.key)
        return keys

    def lookup(self) -> str | None:
        found = self.lookup_with_source()
        return None if found is None else found[0]

    def lookup_with_source(self) -> tuple[str, ValueSource] | None:
        """Return the first value found together with its source, or ``None``."""
        for source in self.chain:
            value = source.lookup()
            if value is not None:
                return value, source
        return None

    def __str__(self) -> str:
        return ",".join(str(source) for source in self.chain)

    def __repr__(self) -> str:
        inner = ",".join(repr(source) for source in self.chain)
        return f"&ValueSourceChain{{Chain:{{{inner}}}}}"


class EnvVarValueSource(ValueSource):
    """A value taken from an environment variable."""

    def __init__(self, key: str) -> None:
        self.key = key

    def lookup(self) -> str | None:
        return os.environ.get(self.key.strip())

    def is_from_env(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"environment variable {_quote(self.key)}"

    def __repr__(self) -> str:
        return f"&envVarValueSource{{Key:{_quote(self.key)}}}"


class FileValueSource(ValueSource):
    """A value taken from the whole contents of a file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def lookup(self) -> str | None:
        try:
            with open(self.path, "rb") as handle:
                data = handle.read()
        except OSError:
            return None
        return data.decode("utf-8", errors="surrogateescape")

    def __str__(self) -> str:
        return f"file {_quote(self.path)}"

    def __repr__(self) -> str:
        return f"&fileValueSource{{Path:{_quote(self.path)}}}"


class MapSource:
    """A named mapping whose values are looked up by dot-separated paths."""

    def __init__(self, name: str, mapping: Mapping | None = None) -> None:
        self.name = name
        self.mapping: Mapping = mapping if mapping is not None else {}

    def lookup(self, name: str) -> Any:
        """Return the value at the dotted path ``name``.

        Raises KeyError if the path does not lead to a value.
        """
        if not name:
            raise KeyError(name)
        *parents, last = name.split(".")
        node = self.mapping
        for section in parents:
            if section not in node:
                raise KeyError(name)
            child = node[section]
            if not isinstance(child, Mapping):
                raise KeyError(name)
            node = child
        if last not in node:
            raise KeyError(name)
        return node[last]

    def __str__(self) -> str:
        return f"map source {_quote(self.name)}"

    def __repr__(self) -> str:
        return f"&mapSource{{name:{_quote(self.name)}}}"


class MapValueSource(ValueSource):
    """A value taken from a key of a :class:`MapSource`."""

    def __init__(self, key: str, map_source: MapSource) -> None:
        self.key = key
        self.map_source = map_source

    def lookup(self) -> str | None:
        try:
            value = self.map_source.lookup(self.key)
        except KeyError:
            return None
        return format_value(value)

    def __str__(self) -> str:
        return f"key {_quote(self.key)} from {self.map_source}"

    def __repr__(self) -> str:
        return f"&mapValueSource{{key:{_quote(self.key)}, src:{self.map_source!r}}}"


def env_var(key: str) -> EnvVarValueSource:
    """Create a source reading the environment variable ``key``."""
    return EnvVarValueSource(key)


def env_vars(*args: str) -> ValueSourceChain:
    """Create a chain of environment variable sources, in order."""
    return ValueSourceChain(*(env_var(key) for key in args))


def file_source(path: str | os.PathLike) -> FileValueSource:
    """Create a source reading the file at ``path``."""
    return FileValueSource(path)


def files(*args: str | os.PathLike) -> ValueSourceChain:
    """Create a chain of file sources, in order."""
    return ValueSourceChain(*(file_source(path) for path in args))