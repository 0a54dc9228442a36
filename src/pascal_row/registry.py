from __future__ import annotations

from typing import Any, Callable

from .adapter import pascal_row
from .widths import safe_lengths

HostFunction = Callable[..., Any]


class FunctionRegistry:
    """
    Registry of host-callable functions.

    Mirrors an extension module: each entry maps a public name to a boundary
    function plus deterministic metadata for CLI inspection.
    """

    DEFAULT_MODULE = "backend"

    def __init__(self) -> None:
        self._functions: dict[str, HostFunction] = {}
        self._metadata: dict[str, dict[str, object]] = {}
        self._register_builtin()

    def _register_builtin(self) -> None:
        self.register(
            name="pascal_row",
            func=pascal_row,
            metadata={
                "description": "Row n-1 of Pascal's triangle as a list of n unsigned integers.",
                "arguments": ["n"],
                "keyword_arguments": ["width", "overflow"],
                "returns": "list[int]",
                "max_safe_length": safe_lengths(),
            },
        )

    def register(self, *, name: str, func: HostFunction, metadata: dict[str, object] | None = None) -> None:
        if not name:
            raise ValueError("Function name must be provided.")
        if not callable(func):
            raise ValueError(f"Function '{name}' is not callable.")

        meta = dict(metadata or {})
        meta.setdefault("description", (func.__doc__ or "").strip())
        meta["name"] = name
        meta.setdefault("module", self.DEFAULT_MODULE)
        meta.setdefault("qualname", f"{func.__module__}.{func.__qualname__}")

        self._functions[name] = func
        self._metadata[name] = meta

    def list_functions(self) -> list[str]:
        return sorted(self._functions.keys())

    def get_function(self, name: str) -> HostFunction:
        try:
            return self._functions[name]
        except KeyError as exc:
            raise KeyError(self._unknown_function_msg(name)) from exc

    def describe_function(self, name: str) -> dict[str, object]:
        try:
            return dict(self._metadata[name])
        except KeyError as exc:
            raise KeyError(self._unknown_function_msg(name)) from exc

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.get_function(name)(*args, **kwargs)

    def _unknown_function_msg(self, name: str) -> str:
        available = ", ".join(self.list_functions()) or "(none)"
        return f"Unknown function '{name}'. Available functions: {available}"
