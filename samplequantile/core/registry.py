"""
samplequantile.core.registry
============================

Documentation metadata for exposed functions.

A `FunctionDoc` carries a name, description, category and worked examples for
a callable; `FunctionRegistry` maps public names to (callable, doc) pairs.
The metadata is descriptive only and never changes what a function computes.

Examples
--------
>>> from samplequantile.core.registry import FunctionDoc, FunctionExample, FunctionRegistry
>>> def double(x): return 2 * x
>>> doc = FunctionDoc(
...     name="Number.Double",
...     description="Double a number.",
...     category="Number",
...     examples=(FunctionExample("Double 2", (2,), {}, 4),),
... )
>>> _ = FunctionRegistry.register(double, doc)
>>> FunctionRegistry.get("Number.Double")(21)
42
>>> doc.check_examples(double)
[]
>>> _ = FunctionRegistry.unregister("Number.Double")
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class FunctionExample:
    """One worked example: call arguments and the documented result."""

    description: str
    args: Tuple[Any, ...]
    kwargs: Mapping[str, Any]
    result: Any

    def code(self, name: str) -> str:
        """Render the example as a call expression."""
        parts = [repr(a) for a in self.args]
        parts += [f"{k}={v!r}" for k, v in self.kwargs.items()]
        return f"{name}({', '.join(parts)})"


@dataclass(frozen=True)
class FunctionDoc:
    """Descriptive metadata for a registered function."""

    name: str
    description: str
    long_description: str = ""
    category: str = ""
    examples: Tuple[FunctionExample, ...] = field(default_factory=tuple)

    def check_examples(
        self, func: Callable[..., Any], tolerance: float = 1e-4
    ) -> List[str]:
        """Evaluate each example against ``func``.

        Returns:
            A list of mismatch descriptions; empty when all examples hold.
            Numeric results are compared within ``tolerance``.
        """
        failures: List[str] = []
        for example in self.examples:
            actual = func(*example.args, **dict(example.kwargs))
            expected = example.result
            if isinstance(expected, float) and isinstance(actual, (int, float)):
                ok = math.isclose(actual, expected, rel_tol=0.0, abs_tol=tolerance)
            else:
                ok = actual == expected
            if not ok:
                failures.append(
                    f"{example.code(self.name)}: expected {expected!r}, got {actual!r}"
                )
        return failures

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "long_description": self.long_description,
            "category": self.category,
            "examples": [
                {
                    "description": ex.description,
                    "code": ex.code(self.name),
                    "result": ex.result,
                }
                for ex in self.examples
            ],
        }


class FunctionRegistry:
    """Registry of documented functions, keyed by public name."""

    _entries: Dict[str, Tuple[Callable[..., Any], FunctionDoc]] = {}

    @classmethod
    def register(cls, func: Callable[..., Any], doc: FunctionDoc) -> Callable[..., Any]:
        """Register ``func`` under ``doc.name`` and return it unchanged."""
        cls._entries[doc.name] = (func, doc)
        return func

    @classmethod
    def unregister(cls, name: str) -> Callable[..., Any]:
        func, _ = cls._entries.pop(name)
        return func

    @classmethod
    def get(cls, name: str) -> Callable[..., Any]:
        """Get the function registered as ``name``."""
        try:
            return cls._entries[name][0]
        except KeyError:
            raise KeyError(f"No function registered as {name!r}") from None

    @classmethod
    def describe(cls, name: str) -> FunctionDoc:
        """Get the documentation registered for ``name``."""
        try:
            return cls._entries[name][1]
        except KeyError:
            raise KeyError(f"No function registered as {name!r}") from None

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._entries)
