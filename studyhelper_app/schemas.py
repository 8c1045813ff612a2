"""
Wire and tool data structures for the Student Helper API.

Implements:
- MathStep / MathToolOutput: structured result of the math tool
- QuizQuestion / QuizToolOutput: structured result of the quiz tool
- ChatRequest / ChatApiResponse: body of POST /api/chat and its reply

JSON keys stay camelCase (toolName, correctAnswer) to match the web client;
Python attributes are snake_case and bridged through aliases.
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictStr


MATH_TOOL_NAME = "showMathSteps"
QUIZ_TOOL_NAME = "askQuizQuestion"

MessageType = Literal["text", "math", "quiz"]


class WireModel(BaseModel):
    """Base model accepting both field names and camelCase aliases."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        """Serialize with wire names, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class MathStep(WireModel):
    """
    One step of a worked solution.

    Attributes:
        step: Description of the step
        substeps: Optional ordered calculations under this step
    """
    step: StrictStr = Field(..., description="Description of the step")
    substeps: Optional[List[StrictStr]] = Field(None, description="Ordered substeps")


class MathToolOutput(WireModel):
    """Result of the showMathSteps tool. `steps` is never empty."""
    tool_name: Literal["showMathSteps"] = Field(..., alias="toolName")
    steps: List[MathStep] = Field(..., min_length=1)


class QuizQuestion(WireModel):
    """
    A single multiple-choice question.

    Attributes:
        question: Question text ("" if the LLM omitted it)
        choices: Ordered answer choices (four on the success path)
        correct_answer: The choice that is correct ("" if the LLM omitted it)
    """
    question: StrictStr = ""
    choices: List[StrictStr]
    correct_answer: StrictStr = Field("", alias="correctAnswer")


class QuizToolOutput(WireModel):
    """Result of the askQuizQuestion tool."""
    tool_name: Literal["askQuizQuestion"] = Field(..., alias="toolName")
    quiz: QuizQuestion


ToolOutput = Union[MathToolOutput, QuizToolOutput]


class ChatRequest(BaseModel):
    message: StrictStr


class ChatApiResponse(WireModel):
    """
    Reply of POST /api/chat.

    `type` tags which shape `tool_output` carries: none for "text",
    MathToolOutput for "math", QuizToolOutput for "quiz".
    """
    message: str
    type: MessageType = "text"
    tool_output: Optional[ToolOutput] = None
