"""Chat model access for description polishing, backed by LangChain."""

from __future__ import annotations

import importlib
import logging
import os
from typing import NamedTuple

from careerhub.config import LLMConfig

logger = logging.getLogger(__name__)


class ChatProvider(NamedTuple):
    module: str
    class_name: str
    package: str
    env_key: str | None


PROVIDERS: dict[str, ChatProvider] = {
    "google": ChatProvider("langchain_google_genai", "ChatGoogleGenerativeAI", "langchain-google-genai", "GOOGLE_API_KEY"),
    "anthropic": ChatProvider("langchain_anthropic", "ChatAnthropic", "langchain-anthropic", "ANTHROPIC_API_KEY"),
    "openai": ChatProvider("langchain_openai", "ChatOpenAI", "langchain-openai", "OPENAI_API_KEY"),
    "ollama": ChatProvider("langchain_ollama", "ChatOllama", "langchain-ollama", None),
}


def _text_of(content) -> str:
    # Gemini and Anthropic may answer with a list of content blocks
    if isinstance(content, list):
        return "".join(
            block if isinstance(block, str) else block.get("text", "")
            for block in content
        )
    return content


class LLMClient:
    """Builds the configured chat model on first use."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config
        self._model = None

    @property
    def available(self) -> bool:
        """True when enabled, the provider package imports and its key is set."""
        if not self._config.enabled:
            return False

        provider = PROVIDERS.get(self._config.provider)
        if provider is None:
            return False

        try:
            importlib.import_module(provider.module)
        except ImportError:
            return False

        return provider.env_key is None or bool(os.environ.get(provider.env_key))

    def _get_model(self):
        if self._model is not None:
            return self._model

        provider = PROVIDERS.get(self._config.provider)
        if provider is None:
            raise ValueError(f"Unknown LLM provider: {self._config.provider}")

        try:
            model_class = getattr(importlib.import_module(provider.module), provider.class_name)
        except ImportError:
            raise RuntimeError(
                f"LLM provider '{self._config.provider}' needs {provider.package}: "
                f"pip install {provider.package}"
            )

        kwargs = {
            "model": self._config.model,
            "temperature": self._config.temperature,
        }
        if self._config.base_url:
            kwargs["base_url"] = self._config.base_url

        logger.debug("Building %s chat model %s", self._config.provider, self._config.model)
        self._model = model_class(**kwargs)
        return self._model

    def invoke(self, prompt: str, **kwargs) -> str:
        """Send one prompt and return the reply as plain text."""
        response = self._get_model().invoke(prompt, **kwargs)
        return _text_of(response.content)


def get_llm_client(config: LLMConfig) -> LLMClient:
    return LLMClient(config)
