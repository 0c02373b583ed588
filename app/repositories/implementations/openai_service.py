from typing import Optional
from openai import OpenAI
import structlog

from app.config.settings import settings
from app.repositories.implementations.base_ai_service import BaseAIService

logger = structlog.get_logger()


class OpenAIService(BaseAIService):
    """OpenAI chat completions implementation of AI service"""

    provider = "openai"

    def __init__(self, client: Optional[OpenAI] = None):
        self.model = settings.openai_model
        self.client = client
        if self.client is None and settings.openai_api_key:
            self.client = OpenAI(
                base_url=settings.openai_base_url,
                api_key=settings.openai_api_key,
                timeout=settings.ai_timeout_seconds,
                max_retries=0,
            )

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def _complete(self, system: str, prompt: str) -> str:
        logger.info("Calling OpenAI chat completions", model=self.model, prompt_preview=prompt[:200])
        response = self.client.chat.completions.create(
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=0.3,
            top_p=0.9,
            model=self.model,
        )

        if not getattr(response, "choices", None):
            return ""
        choice = response.choices[0]
        message = getattr(choice, "message", None)
        return (getattr(message, "content", None) or getattr(choice, "text", "") or "")
