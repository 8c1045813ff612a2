"""
GeneralAnswerTool: free-form educational answers.
"""

from .base_tool import Tool

GENERAL_SYSTEM_PROMPT = (
    "You are a helpful student assistant. Your goal is to provide accurate academic "
    "answers and enhance learning."
)


class GeneralAnswerTool(Tool):
    """
    Answers any question that is neither math nor a quiz request.

    The LLM text is returned verbatim. Provider errors propagate to the caller.
    """

    name: str = "General Answer"
    description: str = "Answers general academic questions with a well-formatted explanation"
    action_type: str = "generalAnswer"
    input_format: str = "The student's question"

    def build_prompt(self, question: str) -> str:
        return f"""Answer the following student question.

Formatting rules:
- Start with a short heading that names the topic
- Put key terms in **bold**
- Organise longer answers into numbered sections
- Use bullet points for lists of facts or steps
- Include at least one concrete example
- Keep paragraphs short and concise

Question: {question}
"""

    def run(self, input_data: str) -> str:
        return self.llm.complete(self.build_prompt(input_data), system=GENERAL_SYSTEM_PROMPT)
