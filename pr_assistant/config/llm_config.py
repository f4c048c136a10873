"""
LLM Configuration for PR Assistant
Supports Anthropic Claude as primary provider with an OpenAI fallback
"""

import os
import logging
from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_REVIEW_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_DOCS_MODEL = "claude-sonnet-4-20250514"


class LLMProvider(str, Enum):
    """Supported LLM providers"""
    ANTHROPIC = "anthropic"
    OPENAI = "openai"  # Fallback for development/testing


class LLMConfig(BaseModel):
    """LLM Configuration model"""
    model_config = {"protected_namespaces": ()}

    provider: LLMProvider = Field(default=LLMProvider.ANTHROPIC)
    llm_model: str = Field(default=DEFAULT_REVIEW_MODEL)
    api_key: Optional[str] = Field(default=None)
    base_url: Optional[str] = Field(default=None)
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, gt=0)
    # Model calls are never retried
    max_retries: int = Field(default=0, ge=0)
    request_timeout: int = Field(default=120, gt=0)


def get_llm_config(default_model: str = DEFAULT_REVIEW_MODEL) -> LLMConfig:
    """
    Get LLM configuration from environment variables
    Auto-detects provider based on API key format if not explicitly set

    Args:
        default_model: Model used when PR_ASSISTANT_LLM_MODEL is not set

    Returns:
        LLMConfig: Configured LLM settings
    """
    anthropic_api_key = os.getenv("ANTHROPIC_API_KEY")
    openai_api_key = os.getenv("OPENAI_API_KEY")

    provider_env = os.getenv("PR_ASSISTANT_LLM_PROVIDER", "").lower()

    if provider_env == "openai":
        provider = LLMProvider.OPENAI
    elif provider_env == "anthropic":
        provider = LLMProvider.ANTHROPIC
    elif anthropic_api_key:
        provider = LLMProvider.ANTHROPIC
    elif openai_api_key and openai_api_key.startswith("sk-"):
        provider = LLMProvider.OPENAI
        logger.info("Auto-detected OpenAI provider based on key format")
    else:
        provider = LLMProvider.ANTHROPIC
        logger.info("Using default Anthropic provider")

    common = dict(
        temperature=float(os.getenv("PR_ASSISTANT_LLM_TEMPERATURE", "0.0")),
        max_tokens=int(os.getenv("PR_ASSISTANT_LLM_MAX_TOKENS", "4096")),
        max_retries=int(os.getenv("PR_ASSISTANT_LLM_MAX_RETRIES", "0")),
        request_timeout=int(os.getenv("PR_ASSISTANT_LLM_TIMEOUT", "120")),
    )

    if provider == LLMProvider.ANTHROPIC:
        return LLMConfig(
            provider=provider,
            llm_model=os.getenv("PR_ASSISTANT_LLM_MODEL", default_model),
            api_key=anthropic_api_key,
            base_url=os.getenv("ANTHROPIC_BASE_URL") or None,
            **common
        )

    return LLMConfig(
        provider=provider,
        llm_model=os.getenv("PR_ASSISTANT_LLM_MODEL", "gpt-4o-mini"),
        api_key=openai_api_key,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        **common
    )


def setup_langsmith() -> None:
    """
    Configure LangSmith for LLM observability and monitoring

    Environment variables required:
    - LANGCHAIN_API_KEY: LangSmith API key
    - LANGCHAIN_PROJECT: Project name (optional, defaults to 'pr-assistant')
    """
    langchain_api_key = os.getenv("LANGCHAIN_API_KEY")

    if langchain_api_key:
        os.environ["LANGCHAIN_TRACING_V2"] = "true"

        if not os.getenv("LANGCHAIN_PROJECT"):
            os.environ["LANGCHAIN_PROJECT"] = "pr-assistant"

        logger.info(f"LangSmith enabled for project: {os.getenv('LANGCHAIN_PROJECT')}")
    else:
        logger.debug("LangSmith not configured - set LANGCHAIN_API_KEY to enable tracing")


def setup_logging(level: str = "INFO") -> None:
    """
    Setup logging configuration for the application

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if level.upper() == "DEBUG":
        logging.getLogger("pr_assistant").setLevel(logging.DEBUG)
        logging.getLogger("langchain").setLevel(logging.INFO)
    else:
        # Normal operation - keep third-party clients quiet
        logging.getLogger("langchain").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


__all__ = [
    "LLMProvider",
    "LLMConfig",
    "get_llm_config",
    "setup_langsmith",
    "setup_logging",
    "DEFAULT_REVIEW_MODEL",
    "DEFAULT_DOCS_MODEL",
]
