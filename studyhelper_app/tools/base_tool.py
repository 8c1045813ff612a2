"""
Base Tool classes for the Student Helper.

All tools inherit from Tool and implement run(). Tools that must return a
fixed JSON shape inherit from StructuredTool, which owns the
prompt → LLM → parse → validate → fallback sequence.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar
from pydantic import BaseModel

from ..errors import ToolOutputParseError
from ..llm import LLMClient
from .parsing import parse_structured_output

T = TypeVar("T", bound=BaseModel)


class Tool(ABC):
    """
    Abstract base class for all Student Helper tools.

    Attributes:
        name: Human-readable name of the tool
        description: What the tool does
        action_type: Unique identifier for this tool (also the JSON toolName)
        input_format: Description of expected input format
        llm: Client the tool sends its prompt to
    """

    name: str = "Base Tool"
    description: str = "Base tool description"
    action_type: str = "base_action"
    input_format: str = "Input format description"

    def __init__(self, llm: LLMClient):
        self.llm = llm

    @abstractmethod
    def run(self, input_data: str) -> Any:
        """
        Execute the tool's functionality.

        Args:
            input_data: The user's question or topic

        Returns:
            Tool-specific result
        """
        pass

    def get_tool_description(self) -> str:
        """
        Generate formatted tool description.

        Returns:
            Formatted string describing the tool
        """
        return f"""
Tool: {self.name}
Action Type: {self.action_type}
Description: {self.description}
Input Format: {self.input_format}
"""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "action_type": self.action_type,
            "description": self.description,
            "input_format": self.input_format,
            "model": self.llm.model,
        }

    def __repr__(self) -> str:
        return f"Tool(name={self.name}, action_type={self.action_type})"


class StructuredTool(Tool, Generic[T]):
    """
    Tool whose LLM reply must be a JSON object matching `output_model`.

    run() never raises: any provider error, parse error or failed check
    yields fallback().
    """

    output_model: Type[T]

    @abstractmethod
    def build_prompt(self, input_data: str) -> str:
        pass

    @abstractmethod
    def fallback(self) -> T:
        """Fixed, always-valid result returned when the LLM output is unusable."""
        pass

    def check(self, output: T) -> None:
        """Extra semantic checks beyond the schema; raise ToolOutputParseError to reject."""

    def parse(self, raw: Optional[str]) -> T:
        """Parse and check raw LLM text, raising ToolOutputParseError on failure."""
        result = parse_structured_output(raw, self.output_model)
        if not result.ok:
            raise result.error
        self.check(result.value)
        return result.value

    def run(self, input_data: str) -> T:
        try:
            raw = self.llm.complete(self.build_prompt(input_data))
            return self.parse(raw)
        except ToolOutputParseError as e:
            print(f"[{self.action_type.upper()} PARSE ERROR] {str(e)}")
            return self.fallback()
        except Exception as e:
            print(f"[{self.action_type.upper()} ERROR] {str(e)}")
            return self.fallback()
