from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin, get_type_hints

JsonSchema = Dict[str, Any]

_SCALAR_TYPES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


class UnknownToolError(KeyError):
    """Raised when a tool name has not been registered."""


def _json_schema(annotation: Any) -> JsonSchema:
    origin = get_origin(annotation)
    if origin is None:
        return {"type": _SCALAR_TYPES.get(annotation, "string")}
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_schema(args[0]) if args else {"type": "string"}
    if origin in (list, List):
        args = get_args(annotation)
        schema: JsonSchema = {"type": "array"}
        if args:
            schema["items"] = _json_schema(args[0])
        return schema
    if origin in (dict, Dict):
        return {"type": "object"}
    return {"type": "string"}


@dataclass(frozen=True)
class ToolFunction:
    name: str
    func: Callable[..., str]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature

    @property
    def parameter_schema(self) -> JsonSchema:
        hints = get_type_hints(self.func)
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            prop = _json_schema(hints.get(param.name, str))
            if param.default is not inspect.Parameter.empty and param.default is not None:
                prop["default"] = param.default
            schema["properties"][param.name] = prop
            if param.default is inspect.Parameter.empty:
                schema["required"].append(param.name)
        if not schema["required"]:
            schema.pop("required")
        return schema

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "parameters": self.parameter_schema,
        }


REGISTRY: Dict[str, ToolFunction] = {}


def register_tool(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., str]], Callable[..., str]]:
    def decorator(func: Callable[..., str]) -> Callable[..., str]:
        if name in REGISTRY:
            raise ValueError(f"Tool '{name}' is already registered.")
        REGISTRY[name] = ToolFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func),
        )
        return func

    return decorator


def get_tools() -> List[ToolFunction]:
    return list(REGISTRY.values())


def get_tool(name: str) -> ToolFunction:
    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownToolError(f"Tool '{name}' is not registered.") from None


def call_tool(name: str, /, **arguments: Any) -> str:
    return get_tool(name).func(**arguments)
