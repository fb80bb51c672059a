import logging
import litellm
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from pennywise.ai.local_advisor import respond
from pennywise.config import Settings, settings
from pennywise.exceptions import ProviderFailure

logger = logging.getLogger(__name__)

litellm.drop_params = True

Message = Dict[str, str]

MOCK_PROVIDER = "mock"


@dataclass
class Completion:
    content: str
    provider: str
    usage: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderSpec:
    name: str
    label: str
    default_model: Optional[str]
    model_prefix: Optional[str] = None
    key_setting: Optional[str] = None
    api_base: Optional[str] = None


PROVIDERS: Dict[str, ProviderSpec] = {
    "openai": ProviderSpec(
        "openai", "OpenAI", "gpt-4o-mini", key_setting="openai_api_key"
    ),
    "groq": ProviderSpec(
        "groq", "Groq", "llama-3.1-8b-instant", "groq/", key_setting="groq_api_key"
    ),
    "xai": ProviderSpec(
        "xai", "xAI (Grok)", "grok-beta", "xai/", key_setting="xai_api_key"
    ),
    "anthropic": ProviderSpec(
        "anthropic", "Anthropic", "claude-3-haiku-20240307", key_setting="anthropic_api_key"
    ),
    "openrouter": ProviderSpec(
        "openrouter", "OpenRouter", "anthropic/claude-3-haiku", "openrouter/",
        key_setting="openrouter_api_key", api_base="https://openrouter.ai/api/v1"
    ),
    "ollama": ProviderSpec(
        "ollama", "Ollama (Local)", "llama3.1:8b", "ollama/", api_base="http://localhost:11434"
    ),
    "huggingface": ProviderSpec(
        "huggingface", "Hugging Face", "microsoft/DialoGPT-medium", "huggingface/",
        key_setting="huggingface_api_key"
    ),
}


def _usage_dict(usage) -> Dict[str, Any]:
    if not usage:
        return {}
    if hasattr(usage, "model_dump"):
        return usage.model_dump()
    return dict(usage)


class CompletionProvider(ABC):
    """A text-completion backend."""

    name: str

    @abstractmethod
    async def complete(
        self,
        messages: List[Message],
        max_tokens: int = 800,
        temperature: float = 0.7
    ) -> Completion:
        """Generate a reply to role-tagged messages, raising ProviderFailure."""


class LiteLLMProvider(CompletionProvider):
    """Any of the network providers, called through litellm."""

    def __init__(
        self,
        spec: ProviderSpec,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None
    ):
        self.spec = spec
        self.name = spec.name
        self.model = self._get_model_string(model or spec.default_model)
        self.api_key = api_key
        self.api_base = api_base or spec.api_base

    def _get_model_string(self, model: str) -> str:
        prefix = self.spec.model_prefix
        if prefix and not model.startswith(prefix):
            return f"{prefix}{model}"
        return model

    async def complete(
        self,
        messages: List[Message],
        max_tokens: int = 800,
        temperature: float = 0.7
    ) -> Completion:
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.api_base:
            kwargs["api_base"] = self.api_base

        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            logger.error(f"AI completion error ({self.name}): {e}")
            raise ProviderFailure(self.name, str(e)) from e

        content = response.choices[0].message.content
        if not content:
            raise ProviderFailure(self.name, "empty response")

        usage = getattr(response, "usage", None)
        return Completion(
            content=content,
            provider=self.name,
            usage=_usage_dict(usage),
        )


class MockProvider(CompletionProvider):
    """Offline provider answering from the local rule table."""

    name = MOCK_PROVIDER

    def answer(self, question: Optional[str], snapshot=None) -> Completion:
        """Answer directly from the user's snapshot instead of rendered prompts."""
        content = respond(question, snapshot)
        return Completion(
            content=content,
            provider=self.name,
            usage={"total_tokens": len(content) // 4},
        )

    async def complete(
        self,
        messages: List[Message],
        max_tokens: int = 800,
        temperature: float = 0.7
    ) -> Completion:
        prompt = messages[-1]["content"] if messages else ""
        return self.answer(prompt)


def build_completion_provider(config: Settings) -> CompletionProvider:
    """Select the provider named in configuration."""
    name = (config.ai_provider or MOCK_PROVIDER).strip().lower()
    if name == MOCK_PROVIDER:
        return MockProvider()

    spec = PROVIDERS.get(name)
    if spec is None:
        logger.warning(f"Unknown AI provider: {name}, falling back to mock")
        return MockProvider()

    api_key = getattr(config, spec.key_setting) if spec.key_setting else None
    return LiteLLMProvider(
        spec,
        model=config.ai_model,
        api_key=api_key,
        api_base=config.ai_base_url,
    )


_provider: Optional[CompletionProvider] = None


def get_completion_provider() -> CompletionProvider:
    global _provider
    if _provider is None:
        _provider = build_completion_provider(settings)
        logger.info(f"Using AI provider: {_provider.name}")
    return _provider


def reset_completion_provider() -> None:
    """Drop the cached provider so the next call re-reads settings."""
    global _provider
    _provider = None
