"""
ShowMathStepsTool: step-by-step math solutions as structured JSON.
"""

from ..schemas import MATH_TOOL_NAME, MathStep, MathToolOutput
from .base_tool import StructuredTool

MATH_FALLBACK_MESSAGE = (
    "I'm sorry, I couldn't generate the math steps correctly. "
    "Please try rephrasing the question."
)


class ShowMathStepsTool(StructuredTool[MathToolOutput]):
    """
    Tool for explaining how to solve a math question step by step.

    Always returns a MathToolOutput with at least one step.
    """

    name: str = "Show Math Steps"
    description: str = (
        "Takes a math question as input (e.g., '2x + 3 = 11') and returns a structured "
        "list of step-by-step explanations including calculations. Use this for any "
        "request involving solving or explaining mathematical problems."
    )
    action_type: str = MATH_TOOL_NAME
    input_format: str = "The mathematical question to solve or explain"
    output_model = MathToolOutput

    def build_prompt(self, input_data: str) -> str:
        return f"""You are an expert math tutor. Explain how to solve the following math question step-by-step.
Break down the solution into a numbered vertical list for main steps, and use bullet points for substeps.
Include all necessary calculations. Format the output strictly as a JSON object with a 'toolName' field set to "{MATH_TOOL_NAME}" and a 'steps' key containing an array of step objects, each with 'step' and optional 'substeps' (array of strings).

Example JSON format:
{{
  "toolName": "{MATH_TOOL_NAME}",
  "steps": [
    {{"step": "Subtract 3 from both sides", "substeps": ["2x + 3 - 3 = 11 - 3", "2x = 8"]}},
    {{"step": "Divide both sides by 2", "substeps": ["x = 4"]}}
  ]
}}

Math Question: {input_data}
"""

    def fallback(self) -> MathToolOutput:
        return MathToolOutput(
            tool_name=MATH_TOOL_NAME,
            steps=[MathStep(step=MATH_FALLBACK_MESSAGE, substeps=[])],
        )
