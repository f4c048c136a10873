"""
Configuration package for PR Assistant
"""

from .llm_config import (
    LLMProvider,
    LLMConfig,
    get_llm_config,
    setup_langsmith,
    setup_logging,
    DEFAULT_REVIEW_MODEL,
    DEFAULT_DOCS_MODEL
)
from .workflow_config import (
    GitHubConfig,
    WaiterConfig,
    DocUpdaterConfig,
    get_github_config,
    get_waiter_config,
    get_doc_updater_config
)

__all__ = [
    "LLMProvider",
    "LLMConfig",
    "get_llm_config",
    "setup_langsmith",
    "setup_logging",
    "DEFAULT_REVIEW_MODEL",
    "DEFAULT_DOCS_MODEL",
    "GitHubConfig",
    "WaiterConfig",
    "DocUpdaterConfig",
    "get_github_config",
    "get_waiter_config",
    "get_doc_updater_config"
]
