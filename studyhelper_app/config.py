"""
Configuration module for the Student Helper backend.
Loads environment variables from the .env file in the project root.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
import os

# .env file in the project root
ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class LLMConfig:
    """Connection settings for one LLM client."""
    api_key: str
    model: str
    temperature: float
    timeout: float
    base_url: Optional[str] = None
    max_tokens: int = 2048


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup."""
    openai_api_key: str
    chat_model: str = DEFAULT_MODEL
    tool_model: str = DEFAULT_MODEL
    chat_temperature: float = 0.7
    tool_temperature: float = 0.5
    llm_timeout_seconds: float = 30.0
    openai_base_url: Optional[str] = None
    strict_quiz_validation: bool = True

    def chat_llm_config(self) -> LLMConfig:
        """Model used for general answers."""
        return LLMConfig(
            api_key=self.openai_api_key,
            model=self.chat_model,
            temperature=self.chat_temperature,
            timeout=self.llm_timeout_seconds,
            base_url=self.openai_base_url,
        )

    def tool_llm_config(self) -> LLMConfig:
        """Model used by the math and quiz tools."""
        return LLMConfig(
            api_key=self.openai_api_key,
            model=self.tool_model,
            temperature=self.tool_temperature,
            timeout=self.llm_timeout_seconds,
            base_url=self.openai_base_url,
        )


def _as_bool(value: Optional[str], default: bool) -> bool:
    """Unset or empty means `default`."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env_path: Optional[Path] = ENV_PATH) -> Settings:
    """
    Build Settings from the .env file and the process environment.

    Raises:
        ValueError: if OPENAI_API_KEY is missing or a numeric variable is malformed
    """
    if env_path is not None:
        load_dotenv(env_path)

    api_key = os.getenv("OPENAI_API_KEY")
    # Ensure critical variables are loaded
    if not api_key:
        raise ValueError("[ERROR] OPENAI_API_KEY is not set in the .env file.")

    chat_model = os.getenv("CHAT_MODEL") or DEFAULT_MODEL
    tool_model = os.getenv("TOOL_MODEL") or chat_model

    try:
        chat_temperature = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
        tool_temperature = float(os.getenv("TOOL_TEMPERATURE", "0.5"))
        timeout = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
    except ValueError as e:
        raise ValueError(f"[ERROR] Invalid numeric setting in environment: {e}") from e

    return Settings(
        openai_api_key=api_key,
        chat_model=chat_model,
        tool_model=tool_model,
        chat_temperature=chat_temperature,
        tool_temperature=tool_temperature,
        llm_timeout_seconds=timeout,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        strict_quiz_validation=_as_bool(os.getenv("STRICT_QUIZ_VALIDATION"), default=True),
    )
