"""
Client-side chat session: message list, quiz answer state, and transport.

The session owns every ChatMessage it creates. Quiz state is mutated in place
on the first answer and is frozen afterwards.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import requests

from ..schemas import ChatApiResponse, MathStep, MathToolOutput, QuizQuestion, QuizToolOutput

CONNECTION_ERROR_MESSAGE = "Error: Could not connect to the chatbot or process your request."

Transport = Callable[[str], Dict]


@dataclass
class QuizAnswerState:
    """UNANSWERED until the first answer, then ANSWERED for good."""
    answered: bool = False
    selected_choice: Optional[str] = None
    is_correct: Optional[bool] = None

    def answer(self, choice: str, correct_answer: str) -> bool:
        """
        Record the first answer.

        Returns:
            True if the state transitioned, False if it was already answered
        """
        if self.answered:
            return False
        self.answered = True
        self.selected_choice = choice
        self.is_correct = choice == correct_answer
        return True


@dataclass
class ChatMessage:
    role: str
    content: str
    type: str = "text"
    math_steps: Optional[List[MathStep]] = None
    quiz_data: Optional[QuizQuestion] = None
    quiz_state: Optional[QuizAnswerState] = None

    @classmethod
    def from_api_response(cls, response: ChatApiResponse) -> "ChatMessage":
        """Turn an API reply into an AI message, with fresh quiz state for quizzes."""
        message = cls(role="ai", content=response.message, type=response.type)
        output = response.tool_output
        if response.type == "math" and isinstance(output, MathToolOutput):
            message.math_steps = list(output.steps)
        elif response.type == "quiz" and isinstance(output, QuizToolOutput):
            message.quiz_data = output.quiz
            message.quiz_state = QuizAnswerState()
        return message


class HttpTransport:
    """Posts messages to a running Student Helper API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 60.0):
        self.url = base_url.rstrip("/") + "/api/chat"
        self.timeout = timeout

    def __call__(self, message: str) -> Dict:
        response = requests.post(self.url, json={"message": message}, timeout=self.timeout)
        response.raise_for_status()
        return response.json()


@dataclass
class ChatSession:
    """
    Ordered chat history plus the single in-flight request guard.

    Attributes:
        transport: Callable sending one message and returning the JSON reply
        messages: All user and AI messages of this session
        loading: True while a request is in flight
    """
    transport: Transport
    messages: List[ChatMessage] = field(default_factory=list)
    loading: bool = False

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Send a user message and append the reply.

        Returns:
            The AI message appended, or None when the text is blank or a
            request is already in flight
        """
        if not text.strip() or self.loading:
            return None

        self.messages.append(ChatMessage(role="user", content=text))
        self.loading = True
        try:
            data = self.transport(text)
            reply = ChatMessage.from_api_response(ChatApiResponse.model_validate(data))
        except Exception as e:
            print(f"[CLIENT ERROR] {str(e)}")
            reply = ChatMessage(role="ai", content=CONNECTION_ERROR_MESSAGE)
        finally:
            self.loading = False

        self.messages.append(reply)
        return reply

    def answer_quiz(self, index: int, choice: str) -> bool:
        """
        Answer the quiz held by messages[index].

        Returns:
            True if the answer was recorded, False for non-quiz messages or
            quizzes that were already answered
        """
        message = self.messages[index]
        if message.type != "quiz" or message.quiz_data is None or message.quiz_state is None:
            return False
        return message.quiz_state.answer(choice, message.quiz_data.correct_answer)
