"""
Thin wrapper around the OpenAI chat-completions API.

Each LLMClient is built from an explicit LLMConfig and owns one OpenAI
client. The dispatcher receives its clients at construction time; nothing in
this package creates a client at import time.
"""

from typing import Dict, List, Optional
from openai import OpenAI

from .config import LLMConfig
from .errors import ProviderError


class LLMClient:
    """
    Text-completion capability used by the tools.

    Attributes:
        config: Model name, temperature, timeout and credentials
        client: Underlying OpenAI SDK client
    """

    def __init__(self, config: LLMConfig, client: Optional[OpenAI] = None):
        self.config = config
        # Retries disabled: one provider call per user turn.
        self.client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self.config.model

    def complete(self, prompt: str, system: Optional[str] = None) -> str:
        """
        Send a prompt and return the raw text of the first choice.

        Args:
            prompt: User message content
            system: Optional system prompt

        Returns:
            Response text ("" if the provider returned no content)

        Raises:
            ProviderError: if the SDK call fails for any reason
        """
        messages: List[Dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            raise ProviderError(f"LLM call failed for {self.config.model}: {str(e)}") from e

        return response.choices[0].message.content or ""

    def __repr__(self) -> str:
        return f"LLMClient(model={self.config.model}, temperature={self.config.temperature})"
