"""
Chat dispatcher for the Student Helper.

Streamlined request handling:
1. Validate the raw message
2. Keyword-based routing to an intent
3. One tool call (math / quiz) or a direct general answer
4. Wrap the result in the tagged ChatApiResponse shape
"""

from typing import Any, Dict, List

from .config import Settings
from .errors import InvalidInputError
from .llm import LLMClient
from .routing import Intent, extract_topic, route
from .schemas import ChatApiResponse
from .tools import AskQuizQuestionTool, GeneralAnswerTool, ShowMathStepsTool, Tool

MATH_LEAD_IN = "Here are the steps to solve your math problem:"
QUIZ_LEAD_IN = "Here's a quiz question for you:"


class ChatDispatcher:
    """
    Routes each message to the matching tool and shapes the reply.

    Attributes:
        math_tool: Step-by-step solver (never raises)
        quiz_tool: Multiple-choice question generator (never raises)
        general_tool: Free-form answers (provider errors propagate)
    """

    def __init__(self, chat_llm: LLMClient, tool_llm: LLMClient, strict_quiz: bool = True):
        self.math_tool = ShowMathStepsTool(tool_llm)
        self.quiz_tool = AskQuizQuestionTool(tool_llm, strict=strict_quiz)
        self.general_tool = GeneralAnswerTool(chat_llm)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatDispatcher":
        """Build the LLM clients once from process settings."""
        chat_llm = LLMClient(settings.chat_llm_config())
        tool_llm = LLMClient(settings.tool_llm_config())
        print(f"[ORCHESTRATOR] Initialized with chat model: {chat_llm.model}, tool model: {tool_llm.model}")
        return cls(chat_llm, tool_llm, strict_quiz=settings.strict_quiz_validation)

    @property
    def tools(self) -> List[Tool]:
        return [self.math_tool, self.quiz_tool, self.general_tool]

    def describe_tools(self) -> Dict[str, Dict[str, Any]]:
        return {tool.action_type: tool.to_dict() for tool in self.tools}

    def handle(self, raw_message: Any) -> ChatApiResponse:
        """
        Main entry point for processing a chat message.

        Raises:
            InvalidInputError: if raw_message is not a non-empty string
            ProviderError: if the general answer LLM call fails
        """
        if not isinstance(raw_message, str) or not raw_message:
            raise InvalidInputError("Message must be a non-empty string")

        print(f"\n[ORCHESTRATOR] Processing: '{raw_message[:50]}...'")
        routing = route(raw_message)
        print(f"[ROUTING] Intent: {routing.intent.value} ({routing.reasoning})")

        if routing.intent is Intent.MATH:
            return ChatApiResponse(
                message=MATH_LEAD_IN,
                type="math",
                tool_output=self.math_tool.run(raw_message),
            )

        if routing.intent is Intent.QUIZ:
            topic = extract_topic(raw_message)
            print(f"[ROUTING] Quiz topic: '{topic}'")
            return ChatApiResponse(
                message=QUIZ_LEAD_IN,
                type="quiz",
                tool_output=self.quiz_tool.run(topic),
            )

        return ChatApiResponse(message=self.general_tool.run(raw_message), type="text")
