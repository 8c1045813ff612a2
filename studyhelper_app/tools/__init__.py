"""
Tools used by the chat dispatcher.
"""

from .base_tool import Tool, StructuredTool
from .general_tool import GeneralAnswerTool
from .math_tool import ShowMathStepsTool
from .parsing import ParseResult, extract_json_payload, parse_structured_output
from .quiz_tool import AskQuizQuestionTool

__all__ = [
    "Tool",
    "StructuredTool",
    "ShowMathStepsTool",
    "AskQuizQuestionTool",
    "GeneralAnswerTool",
    "ParseResult",
    "extract_json_payload",
    "parse_structured_output",
]
