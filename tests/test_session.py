import requests

from studyhelper_app.client.session import (
    CONNECTION_ERROR_MESSAGE,
    ChatMessage,
    ChatSession,
    HttpTransport,
    QuizAnswerState,
)
from studyhelper_app.schemas import QuizQuestion

QUIZ_REPLY = {
    "message": "Here's a quiz question for you:",
    "type": "quiz",
    "tool_output": {
        "toolName": "askQuizQuestion",
        "quiz": {
            "question": "What is the capital of France?",
            "choices": ["Berlin", "Madrid", "Paris", "Rome"],
            "correctAnswer": "Paris",
        },
    },
}

MATH_REPLY = {
    "message": "Here are the steps to solve your math problem:",
    "type": "math",
    "tool_output": {"toolName": "showMathSteps", "steps": [{"step": "Subtract 3", "substeps": ["2x=8"]}]},
}


def quiz_message():
    return ChatMessage(
        role="ai",
        content="Here's a quiz question for you:",
        type="quiz",
        quiz_data=QuizQuestion(
            question="What is the capital of France?",
            choices=["Berlin", "Madrid", "Paris", "Rome"],
            correct_answer="Paris",
        ),
        quiz_state=QuizAnswerState(),
    )


def test_quiz_state_transitions_once():
    session = ChatSession(transport=lambda text: QUIZ_REPLY)
    session.messages.append(quiz_message())

    assert session.answer_quiz(0, "Paris") is True
    state = session.messages[0].quiz_state
    assert (state.answered, state.selected_choice, state.is_correct) == (True, "Paris", True)

    assert session.answer_quiz(0, "Rome") is False
    assert (state.answered, state.selected_choice, state.is_correct) == (True, "Paris", True)


def test_quiz_state_wrong_answer():
    state = QuizAnswerState()
    assert state.answer("Berlin", "Paris") is True
    assert state.is_correct is False
    assert state.selected_choice == "Berlin"


def test_answer_quiz_ignores_non_quiz_messages():
    session = ChatSession(transport=lambda text: {})
    session.messages.append(ChatMessage(role="user", content="hello"))
    assert session.answer_quiz(0, "Paris") is False


def test_send_quiz_creates_unanswered_state():
    sent = []

    def transport(text):
        sent.append(text)
        return QUIZ_REPLY

    session = ChatSession(transport=transport)
    reply = session.send("quiz me on capitals")

    assert sent == ["quiz me on capitals"]
    assert [m.role for m in session.messages] == ["user", "ai"]
    assert reply.type == "quiz"
    assert reply.quiz_data.correct_answer == "Paris"
    assert reply.quiz_state == QuizAnswerState()
    assert session.loading is False


def test_send_math_keeps_steps():
    session = ChatSession(transport=lambda text: MATH_REPLY)
    reply = session.send("solve 2x + 3 = 11")

    assert reply.type == "math"
    assert reply.math_steps[0].substeps == ["2x=8"]
    assert reply.quiz_state is None


def test_send_blank_is_ignored():
    session = ChatSession(transport=lambda text: QUIZ_REPLY)
    assert session.send("   ") is None
    assert session.messages == []


def test_send_while_loading_is_ignored():
    session = ChatSession(transport=lambda text: QUIZ_REPLY)
    session.loading = True
    assert session.send("quiz me") is None
    assert session.messages == []


def test_transport_failure_becomes_error_message():
    def transport(text):
        raise requests.ConnectionError("refused")

    session = ChatSession(transport=transport)
    reply = session.send("hello")

    assert reply.content == CONNECTION_ERROR_MESSAGE
    assert reply.type == "text"
    assert session.loading is False


def test_http_transport_posts_message(monkeypatch):
    calls = {}

    class FakeResponse:
        def raise_for_status(self):
            pass

        def json(self):
            return {"message": "hi", "type": "text"}

    def fake_post(url, json, timeout):
        calls.update(url=url, json=json, timeout=timeout)
        return FakeResponse()

    monkeypatch.setattr(requests, "post", fake_post)

    transport = HttpTransport("http://example.test/", timeout=5)
    assert transport("hello") == {"message": "hi", "type": "text"}
    assert calls == {"url": "http://example.test/api/chat", "json": {"message": "hello"}, "timeout": 5}
