"""
AskQuizQuestionTool: single multiple-choice question as structured JSON.
"""

from ..errors import ToolOutputParseError
from ..llm import LLMClient
from ..schemas import QUIZ_TOOL_NAME, QuizQuestion, QuizToolOutput
from .base_tool import StructuredTool

QUIZ_FALLBACK_MESSAGE = (
    "I'm sorry, I couldn't generate a quiz question on that topic. "
    "Please try another subject."
)
NUM_CHOICES = 4


class AskQuizQuestionTool(StructuredTool[QuizToolOutput]):
    """
    Tool for generating one multiple-choice question about a topic.

    With strict=True (default) a reply is rejected unless it has a non-empty
    question, exactly four distinct choices, and a correctAnswer that is one
    of them. With strict=False only the tag and a list of string choices are
    required; a missing question or correctAnswer defaults to "".
    """

    name: str = "Ask Quiz Question"
    description: str = (
        "Takes a subject or topic as input (e.g., 'water cycle', 'photosynthesis') and "
        "returns a single multiple-choice question with 4 answer choices. Use this when "
        "the user explicitly asks for a quiz or test."
    )
    action_type: str = QUIZ_TOOL_NAME
    input_format: str = "The subject or topic for the quiz question"
    output_model = QuizToolOutput

    def __init__(self, llm: LLMClient, strict: bool = True):
        super().__init__(llm)
        self.strict = strict

    def build_prompt(self, input_data: str) -> str:
        return f"""Generate a single multiple-choice quiz question about the topic: '{input_data}'.
Provide {NUM_CHOICES} distinct answer choices. Clearly indicate the correct answer.
Format the output strictly as a JSON object with a 'toolName' field set to "{QUIZ_TOOL_NAME}" and a 'quiz' key containing 'question', 'choices' (an array of strings), and 'correctAnswer' (a string matching one of the choices).

Example JSON format:
{{
  "toolName": "{QUIZ_TOOL_NAME}",
  "quiz": {{
    "question": "What is the capital of France?",
    "choices": ["Berlin", "Madrid", "Paris", "Rome"],
    "correctAnswer": "Paris"
  }}
}}
"""

    def check(self, output: QuizToolOutput) -> None:
        if not self.strict:
            return

        quiz = output.quiz
        if not quiz.question.strip():
            raise ToolOutputParseError("Quiz question is empty")
        if len(quiz.choices) != NUM_CHOICES:
            raise ToolOutputParseError(
                f"Expected {NUM_CHOICES} choices, got {len(quiz.choices)}"
            )
        if len(set(quiz.choices)) != NUM_CHOICES:
            raise ToolOutputParseError("Quiz choices are not distinct")
        if not quiz.correct_answer or quiz.correct_answer not in quiz.choices:
            raise ToolOutputParseError(
                f"Correct answer '{quiz.correct_answer}' is not one of the choices"
            )

    def fallback(self) -> QuizToolOutput:
        return QuizToolOutput(
            tool_name=QUIZ_TOOL_NAME,
            quiz=QuizQuestion(question=QUIZ_FALLBACK_MESSAGE, choices=[], correct_answer="")
        )
