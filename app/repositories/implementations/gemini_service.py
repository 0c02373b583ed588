from typing import Optional

import google.generativeai as genai
import structlog

from app.config.settings import settings
from app.repositories.implementations.base_ai_service import BaseAIService

logger = structlog.get_logger()


class GeminiService(BaseAIService):
    """Google Gemini implementation of AI service."""

    provider = "gemini"

    def __init__(self, model: Optional["genai.GenerativeModel"] = None) -> None:
        self.model = model
        if self.model is None and settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
            self.model = genai.GenerativeModel(settings.gemini_model)

    @property
    def is_configured(self) -> bool:
        return self.model is not None

    def _complete(self, system: str, prompt: str) -> str:
        logger.info("Calling Gemini generate_content", model=settings.gemini_model, prompt_preview=prompt[:200])
        response = self.model.generate_content(
            f"{system}\n\n{prompt}",
            generation_config=genai.types.GenerationConfig(
                max_output_tokens=1500,
                temperature=0.3,
                top_p=0.9,
                # Ask the model to return raw JSON, no prose
                response_mime_type="application/json",
            ),
            request_options={"timeout": settings.ai_timeout_seconds},
        )
        return getattr(response, "text", None) or ""
