"""Suggestion generator.

Asks the text-generation backend for criteria and pros/cons and returns a
validated payload. The payload is never merged automatically; callers pass
it to the suggestion service once the user accepts it.
"""

import logging

from clarify.ai.http import CompletionClient
from clarify.ai.parser import SuggestionParseError, parse_suggestion
from clarify.ai.prompts import build_suggestion_prompt
from clarify.core.exceptions import ConfigurationError, ValidationError
from clarify.core.schemas.suggestion import SuggestionPayload
from clarify.utils.config import AISettings, get_settings

logger = logging.getLogger(__name__)


class SuggestionGenerator:
    """Generates candidate criteria and evaluations for a decision."""

    def __init__(
        self,
        settings: AISettings | None = None,
        client: CompletionClient | None = None,
    ) -> None:
        self._settings = settings or get_settings().ai
        self._client = client

    def _get_client(self) -> CompletionClient:
        if self._client is None:
            if not self._settings.api_key:
                raise ConfigurationError("AI API key is not configured")
            self._client = CompletionClient(
                base_url=self._settings.base_url,
                api_key=self._settings.api_key,
                max_retries=self._settings.max_retries,
            )
        return self._client

    async def suggest(
        self, title: str, description: str, options: list[str]
    ) -> SuggestionPayload:
        """Generate a suggestion for a decision.

        Raises:
            ValidationError: If the title or options are missing.
            ConfigurationError: If no API key is configured.
            CompletionAPIError: If the backend call fails.
            SuggestionParseError: If the response isn't a valid suggestion.
        """
        options = [o.strip() for o in options if o and o.strip()]
        if not title or not title.strip() or not options:
            raise ValidationError("decisionTitle and at least one option are required")

        client = self._get_client()
        prompt = build_suggestion_prompt(title.strip(), description, options)
        content = await client.complete(
            prompt,
            model=self._settings.model,
            temperature=self._settings.temperature,
        )

        try:
            payload = parse_suggestion(content)
        except SuggestionParseError:
            logger.warning(
                "Could not parse suggestion response (%d chars)",
                len(content),
                extra={"model": self._settings.model},
            )
            raise

        logger.info(
            "Generated %d criteria and %d evaluations",
            len(payload.criteria), len(payload.evaluations),
            extra={"model": self._settings.model},
        )
        return payload

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
