import inspect
from dataclasses import dataclass
from typing import Callable, Dict, Any, List, Optional, Type
from pydantic import BaseModel, ValidationError
from seo_publisher.core.context import ToolContext
from seo_publisher.core.errors import UnknownToolError
from seo_publisher.core.mcp_types import ToolDefinition, ToolInputSchema

class InvalidArgumentsError(ValueError):
    pass

@dataclass(frozen=True)
class RegisteredTool:
    definition: ToolDefinition
    arguments: Type[BaseModel]
    handler: Callable

    @property
    def parameter_order(self) -> List[str]:
        return list(self.arguments.model_fields)

    def extract(self, arguments: Any, strict: bool = True) -> List[Any]:
        """Positional handler arguments, in declared field order, with defaults applied."""
        name = self.definition.name
        if strict:
            try:
                parsed = self.arguments.model_validate(arguments)
            except ValidationError as e:
                problems = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
                    for err in e.errors()
                )
                raise InvalidArgumentsError(f"Invalid arguments for {name}: {problems}") from e
            return [getattr(parsed, field) for field in self.parameter_order]

        if not isinstance(arguments, dict):
            raise InvalidArgumentsError(f"Invalid arguments for {name}: arguments must be an object")
        values = []
        for field, info in self.arguments.model_fields.items():
            if field in arguments:
                values.append(arguments[field])
            elif info.is_required():
                values.append(None)
            else:
                values.append(info.get_default(call_default_factory=True))
        return values

class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def register(self, name: str, description: str, arguments: Type[BaseModel]):
        def decorator(func: Callable):
            if name in self._tools:
                raise ValueError(f"Tool {name} already registered")
            schema = arguments.model_json_schema()
            self._tools[name] = RegisteredTool(
                definition=ToolDefinition(
                    name=name,
                    description=description,
                    inputSchema=ToolInputSchema(
                        properties=schema.get("properties", {}),
                        required=schema.get("required"),
                    ),
                ),
                arguments=arguments,
                handler=func,
            )
            return func
        return decorator

    def lookup(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def list_tools(self) -> List[ToolDefinition]:
        return [tool.definition for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: Any, context: ToolContext, strict: bool = True) -> Any:
        tool = self.lookup(name) if isinstance(name, str) else None
        if not tool:
            raise UnknownToolError(name)

        args = tool.extract(arguments, strict=strict)

        # Check if function is async
        if inspect.iscoroutinefunction(tool.handler):
            return await tool.handler(context, *args)
        else:
            return tool.handler(context, *args)

registry = ToolRegistry()
