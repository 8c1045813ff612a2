"""
Client side of the Student Helper: session state and rendering.
"""

from .formatter import render_message
from .session import ChatMessage, ChatSession, HttpTransport, QuizAnswerState

__all__ = [
    "ChatMessage",
    "ChatSession",
    "HttpTransport",
    "QuizAnswerState",
    "render_message",
]
