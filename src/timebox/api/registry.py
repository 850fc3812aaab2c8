from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin, get_type_hints

JsonSchema = Dict[str, Any]

_JSON_TYPES = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
}


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        return _JSON_TYPES.get(annotation, "string")
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return "string"


def _parameter_schema(param: inspect.Parameter, annotation: Any) -> JsonSchema:
    schema: JsonSchema = {"type": _json_type(annotation)}
    default = param.default
    if default is not inspect.Parameter.empty and isinstance(default, (str, int, float, bool)):
        schema["default"] = default
    return schema


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    annotations: Dict[str, Any] = field(default_factory=dict)

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": []}
        for param in self.signature.parameters.values():
            annotation = self.annotations.get(param.name, param.annotation)
            schema["properties"][param.name] = _parameter_schema(param, annotation)
            if param.default is inspect.Parameter.empty:
                schema["required"].append(param.name)
        if not schema["required"]:
            schema.pop("required")
        return schema


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        hints = get_type_hints(func)
        hints.pop("return", None)
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func),
            annotations=hints,
        )
        return func

    return decorator


def get_api_functions(category: Optional[str] = None) -> List[ApiFunction]:
    functions = list(REGISTRY.values())
    if category is None:
        return functions
    return [function for function in functions if function.category == category]


def call_api(name: str, /, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
