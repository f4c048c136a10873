"""
LLM Client for PR Assistant
Provides unified interface for Anthropic and OpenAI chat models using LangChain
"""

import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from ..config.llm_config import LLMConfig, LLMProvider, get_llm_config, setup_langsmith

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Standardized LLM response"""
    content: str
    metadata: Dict[str, Any]
    model_used: str
    tokens_used: Optional[int] = None


def first_text_block(content: Any) -> str:
    """
    Return the first text block of a chat model response

    LangChain reports a single text block as a plain string and mixed content
    as a list of blocks (strings or dicts with a "type" key).
    """
    if isinstance(content, str):
        return content
    for block in content or []:
        if isinstance(block, str):
            return block
        if isinstance(block, dict) and block.get("type") == "text":
            return block.get("text", "")
    raise ValueError("Model response contained no text block")


class PRAssistantLLMClient:
    """
    Unified LLM client for PR Assistant
    Sends one user message per call; responses are never retried
    """

    def __init__(self, config: Optional[LLMConfig] = None):
        """Initialize LLM client with LangSmith integration"""
        setup_langsmith()

        self.config = config or get_llm_config()
        self.llm = self._initialize_llm()

        logger.info(f"Initialized LLM client with provider: {self.config.provider.value}, model: {self.config.llm_model}")

    def _initialize_llm(self) -> BaseChatModel:
        """
        Initialize the appropriate chat model based on configuration

        Returns:
            BaseChatModel: Configured chat model
        """
        if self.config.provider == LLMProvider.ANTHROPIC:
            return self._initialize_anthropic()
        return self._initialize_openai()

    def _initialize_anthropic(self) -> ChatAnthropic:
        if not self.config.api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable is required for Anthropic")

        kwargs = {}
        if self.config.base_url:
            kwargs["base_url"] = self.config.base_url

        return ChatAnthropic(
            model=self.config.llm_model,
            api_key=self.config.api_key,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            max_retries=self.config.max_retries,
            timeout=self.config.request_timeout,
            **kwargs
        )

    def _initialize_openai(self) -> ChatOpenAI:
        if not self.config.api_key:
            raise ValueError("OPENAI_API_KEY environment variable is required for OpenAI")

        return ChatOpenAI(
            model=self.config.llm_model,
            api_key=self.config.api_key,
            base_url=self.config.base_url,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            max_retries=self.config.max_retries,
            request_timeout=self.config.request_timeout
        )

    async def generate_response(self, prompt: str) -> LLMResponse:
        """
        Generate response using LLM

        Args:
            prompt: User prompt

        Returns:
            LLMResponse: Standardized response object holding the first text block
        """
        try:
            response = await self.llm.ainvoke([HumanMessage(content=prompt)])
            metadata = getattr(response, "response_metadata", {}) or {}
            usage = getattr(response, "usage_metadata", None) or {}

            return LLMResponse(
                content=first_text_block(response.content),
                metadata=metadata,
                model_used=self.config.llm_model,
                tokens_used=usage.get("total_tokens")
            )

        except Exception as e:
            logger.error(f"Error generating LLM response: {str(e)}")
            raise


def create_llm_client(config: Optional[LLMConfig] = None) -> PRAssistantLLMClient:
    """
    Factory function to create LLM client

    Args:
        config: Optional LLM configuration

    Returns:
        PRAssistantLLMClient: Configured LLM client
    """
    return PRAssistantLLMClient(config)


__all__ = ["PRAssistantLLMClient", "LLMResponse", "create_llm_client", "first_text_block"]
