"""LLM integration for CareerHub."""

from careerhub.llm.client import LLMClient, get_llm_client

__all__ = ["LLMClient", "get_llm_client"]
