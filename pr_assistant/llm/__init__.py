"""
LLM package for PR Assistant
"""

from .llm_client import (
    PRAssistantLLMClient,
    LLMResponse,
    create_llm_client,
    first_text_block
)

__all__ = [
    "PRAssistantLLMClient",
    "LLMResponse",
    "create_llm_client",
    "first_text_block"
]
