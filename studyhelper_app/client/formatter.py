"""
Plain-text rendering of chat messages for terminals and logs.
"""

from typing import List

from ..schemas import MathStep
from .session import ChatMessage

CHOICE_LABELS = "ABCDEFGH"


def render_math_steps(steps: List[MathStep]) -> str:
    lines = ["📐 Solution Steps"]
    for i, step in enumerate(steps, 1):
        lines.append(f"{i}. {step.step}")
        for substep in step.substeps or []:
            lines.append(f"     → {substep}")
    return "\n".join(lines)


def render_quiz(message: ChatMessage) -> str:
    quiz = message.quiz_data
    state = message.quiz_state
    lines = [quiz.question]

    for label, choice in zip(CHOICE_LABELS, quiz.choices):
        marker = " "
        if state is not None and state.answered:
            if choice == quiz.correct_answer:
                marker = "✓"
            elif choice == state.selected_choice:
                marker = "✗"
        lines.append(f" {marker} {label}) {choice}")

    if state is not None and state.answered:
        if state.is_correct:
            lines.append("Correct!")
        else:
            lines.append(f"Incorrect. The correct answer was: {quiz.correct_answer}")
    return "\n".join(lines)


def render_message(message: ChatMessage) -> str:
    """
    Render one message.

    Raises:
        ValueError: for an unknown message type
    """
    prefix = "You" if message.role == "user" else "Helper"

    if message.type == "text":
        body = message.content
    elif message.type == "math":
        body = message.content
        if message.math_steps:
            body += "\n" + render_math_steps(message.math_steps)
    elif message.type == "quiz":
        body = message.content
        if message.quiz_data is not None:
            body += "\n" + render_quiz(message)
    else:
        raise ValueError(f"Unknown message type: {message.type}")

    return f"{prefix}: {body}"
