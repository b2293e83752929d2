"""LLM client — one chat completion against OpenAI-compatible or Anthropic endpoints."""

import logging

import anthropic
import openai
from openai import AsyncOpenAI

from app.config import Settings
from app.exceptions import ConfigurationError, GenerationProviderError

logger = logging.getLogger(__name__)

DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"


class LLMClient:
    """Async chat-completion client for a single configured provider.

    `provider` is "openai" (OpenAI or any OpenAI-compatible gateway via
    `base_url`) or "anthropic".
    """

    def __init__(
        self,
        api_key: str | None,
        provider: str = "openai",
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        timeout: float = 60.0,
    ):
        self.provider = provider
        self.model = model
        self._api_key = (api_key or "").strip()
        self._base_url = base_url or None
        self._timeout = timeout
        self._openai: AsyncOpenAI | None = None
        self._anthropic: anthropic.AsyncAnthropic | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient":
        return cls(
            api_key=settings.llm_api_key,
            provider=settings.llm_provider,
            model=settings.llm_model,
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def close(self):
        if self._openai is not None:
            await self._openai.close()
            self._openai = None
        if self._anthropic is not None:
            await self._anthropic.close()
            self._anthropic = None

    def _openai_client(self) -> AsyncOpenAI:
        if self._openai is None:
            self._openai = AsyncOpenAI(
                api_key=self._api_key, base_url=self._base_url, timeout=self._timeout
            )
        return self._openai

    def _anthropic_client(self) -> anthropic.AsyncAnthropic:
        if self._anthropic is None:
            self._anthropic = anthropic.AsyncAnthropic(
                api_key=self._api_key, base_url=self._base_url, timeout=self._timeout
            )
        return self._anthropic

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int = 4000,
        temperature: float = 0.7,
        json_mode: bool = False,
    ) -> str:
        """Get a completion from the configured provider.

        Args:
            system: System prompt
            user: User message
            max_tokens: Max output tokens
            temperature: Sampling temperature
            json_mode: If True, force JSON output (OpenAI response_format)

        Returns:
            Raw text response from the LLM (may be empty).

        Raises:
            ConfigurationError: no API key configured.
            GenerationProviderError: the provider call failed.
        """
        if not self.configured:
            raise ConfigurationError("LLM API key is not configured")

        if self.provider == "anthropic":
            return await self._complete_anthropic(system, user, max_tokens, temperature)
        if self.provider == "openai":
            return await self._complete_openai(system, user, max_tokens, temperature, json_mode)
        raise ConfigurationError(f"Unknown LLM provider: {self.provider}")

    async def _complete_openai(
        self, system: str, user: str, max_tokens: int, temperature: float, json_mode: bool
    ) -> str:
        kwargs: dict = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._openai_client().chat.completions.create(**kwargs)
        except openai.APIStatusError as e:
            logger.error(f"LLM gateway error: {e.status_code} {e.message}")
            raise GenerationProviderError(
                f"LLM gateway error: {e.status_code}", status_code=e.status_code
            ) from e
        except openai.APIError as e:
            logger.error(f"LLM request failed: {e}")
            raise GenerationProviderError(f"LLM request failed: {e}") from e

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()

    async def _complete_anthropic(
        self, system: str, user: str, max_tokens: int, temperature: float
    ) -> str:
        try:
            response = await self._anthropic_client().messages.create(
                model=self.model if self.model.startswith("claude") else DEFAULT_ANTHROPIC_MODEL,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Anthropic error: {e.status_code} {e.message}")
            raise GenerationProviderError(
                f"Anthropic error: {e.status_code}", status_code=e.status_code
            ) from e
        except anthropic.APIError as e:
            logger.error(f"Anthropic request failed: {e}")
            raise GenerationProviderError(f"Anthropic request failed: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return text.strip()
