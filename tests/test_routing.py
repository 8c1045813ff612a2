import pytest

from studyhelper_app.routing import Intent, classify, extract_topic, route


@pytest.mark.parametrize("message", [
    "solve 2x + 3 = 11",
    "Can you SOLVE this for me?",
    "What is the derivative of x^2?",
    "calculate 15% of 80",
    "what is 7*8",
    "12 - 4",
    "if 3y equals 12, what is y",
    "help with calculus homework",
    "find x when x = 2y",
])
def test_math_messages(message):
    assert classify(message) is Intent.MATH


def test_math_wins_over_quiz():
    assert classify("quiz me: solve 2x = 4") is Intent.MATH
    assert classify("give me a quiz question about 3+4") is Intent.MATH


@pytest.mark.parametrize("message", [
    "Quiz me on photosynthesis",
    "Can you ask me something about the French Revolution?",
    "I want to practice biology",
    "Give me a multiple choice question on planets",
    "true or false about volcanoes",
    "help me prepare for my history exam",
])
def test_quiz_messages(message):
    assert classify(message) is Intent.QUIZ


@pytest.mark.parametrize("message", [
    "What is photosynthesis?",
    "Explain the causes of World War I",
    "Tell me about a famous poet",
    "Who wrote Hamlet",
])
def test_general_messages(message):
    assert classify(message) is Intent.GENERAL


def test_route_reports_trigger():
    decision = route("Please simplify this")
    assert decision.intent is Intent.MATH
    assert decision.trigger == "simplify"

    decision = route("Explain gravity")
    assert decision.intent is Intent.GENERAL
    assert decision.trigger is None


def test_route_inline_expression():
    decision = route("what is 2x")
    assert decision.intent is Intent.MATH
    assert decision.trigger == "2x"


def test_extract_topic():
    assert extract_topic("Quiz me on the water cycle!") == "the water cycle"
    assert extract_topic("Give me a test about photosynthesis?") == "photosynthesis"
    assert extract_topic("  practice quiz  ") == "practice quiz"


@pytest.mark.parametrize("message", ["what is a - b", "quiz me on a - b", "x - y"])
def test_minus_operator_is_math(message):
    assert classify(message) is Intent.MATH


def test_minus_operator_trigger():
    decision = route("what is a - b")
    assert decision.intent is Intent.MATH
    assert decision.trigger == "-"
