"""
Keyword-based intent routing for incoming chat messages.

Routing is stateless and looks only at the current message:
1. MATH if a math keyword, an operator, or an inline expression is present
2. QUIZ if a quiz keyword is present
3. GENERAL otherwise
MATH is checked first, so "quiz me: solve 2x = 4" is MATH.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Intent(Enum):
    """Classified purpose of a user message."""
    MATH = "math"
    QUIZ = "quiz"
    GENERAL = "general"


MATH_KEYWORDS = (
    "solve", "equation", "factor", "derivative", "integral", "calculate",
    "simplify", "expand", "find x", "find y", "algebra", "calculus",
    "x =", "y =",
)

MATH_OPERATORS = ("+", "-", "*", "/", "^", "=")

QUIZ_KEYWORDS = (
    "quiz", "test", "question", "ask me", "challenge me", "practice",
    "multiple choice", "true or false", "exam",
)

# 2x, 10y, 3 + , -4, 5^ ...
INLINE_EXPRESSION_RE = re.compile(
    r"\b\d+[a-z]\b"
    r"|\d\s*[-+*/^=]"
    r"|[-+*/^=]\s*\d"
)

TOPIC_RE = re.compile(r"\b(?:on|about|regarding|covering)\s+(.+)$", re.IGNORECASE | re.DOTALL)


@dataclass
class RoutingDecision:
    """Routing outcome together with what triggered it."""
    intent: Intent
    trigger: Optional[str]
    reasoning: str


def route(message: str) -> RoutingDecision:
    """Classify a message and explain which rule fired."""
    text = message.lower()

    for keyword in MATH_KEYWORDS:
        if keyword in text:
            return RoutingDecision(Intent.MATH, keyword, f"Math keyword '{keyword}'")

    for operator in MATH_OPERATORS:
        if operator in text:
            return RoutingDecision(Intent.MATH, operator, f"Arithmetic operator '{operator}'")

    match = INLINE_EXPRESSION_RE.search(text)
    if match:
        return RoutingDecision(Intent.MATH, match.group(0), "Inline algebraic/arithmetic expression")

    for keyword in QUIZ_KEYWORDS:
        if keyword in text:
            return RoutingDecision(Intent.QUIZ, keyword, f"Quiz keyword '{keyword}'")

    return RoutingDecision(Intent.GENERAL, None, "No math or quiz trigger")


def classify(message: str) -> Intent:
    """Return MATH, QUIZ or GENERAL for a message."""
    return route(message).intent


def extract_topic(message: str) -> str:
    """
    Pull the subject out of a quiz request.

    "Quiz me on the water cycle!" -> "the water cycle"
    Falls back to the whole message when no "on/about ..." phrase is found.
    """
    match = TOPIC_RE.search(message.strip())
    if match:
        topic = match.group(1).strip().rstrip("?!.").strip()
        if topic:
            return topic
    return message.strip()
