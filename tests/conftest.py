import pytest

from studyhelper_app.orchestrator import ChatDispatcher


class FakeLLM:
    """Stands in for LLMClient: returns canned text or raises."""

    def __init__(self, reply="", error=None, model="fake-model"):
        self.reply = reply
        self.error = error
        self.model = model
        self.prompts = []

    def complete(self, prompt, system=None):
        self.prompts.append((prompt, system))
        if self.error is not None:
            raise self.error
        return self.reply


MATH_JSON = '{"toolName":"showMathSteps","steps":[{"step":"Subtract 3","substeps":["2x=8"]}]}'

QUIZ_JSON = (
    '{"toolName":"askQuizQuestion","quiz":{"question":"What is the capital of France?",'
    '"choices":["Berlin","Madrid","Paris","Rome"],"correctAnswer":"Paris"}}'
)


def fenced(payload):
    return f"Sure! Here you go:\n```json\n{payload}\n```\nHope this helps."


@pytest.fixture
def chat_llm():
    return FakeLLM(reply="## Photosynthesis\n\n**Photosynthesis** turns light into chemical energy.")


@pytest.fixture
def tool_llm():
    return FakeLLM(reply=fenced(MATH_JSON))


@pytest.fixture
def dispatcher(chat_llm, tool_llm):
    return ChatDispatcher(chat_llm, tool_llm)
