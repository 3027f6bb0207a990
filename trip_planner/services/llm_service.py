import logging
from typing import Any, List, Optional
from dataclasses import dataclass

from google import genai
from google.genai import types

from trip_planner.config import Settings
from trip_planner.errors import ConfigurationError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


@dataclass
class LLMConfig:
    """Configuration for LLM calls"""
    model: str = "gemini-2.5-flash"
    temperature: float = 0.7
    top_p: float = 0.95
    max_output_tokens: int = 8000


@dataclass
class LLMResponse:
    """Standardized LLM response"""
    success: bool
    content: str
    raw_response: Any
    error: Optional[str] = None


class GeminiLLMService:
    """Gemini text generation through the google-genai client, authenticated with an API key"""

    def __init__(self, api_key: str, timeout_seconds: Optional[float] = None):
        if not api_key:
            raise ConfigurationError("API key not configured")

        http_options = None
        if timeout_seconds:
            # HttpOptions.timeout is in milliseconds
            http_options = types.HttpOptions(timeout=int(timeout_seconds * 1000))

        self.client = genai.Client(api_key=api_key, http_options=http_options)
        logger.info("Initialized Gemini client")

    def _create_contents(self, system_instruction: str, user_message: str) -> List[types.Content]:
        """Create content structure for the LLM"""
        combined_message = f"{system_instruction}\n\n{user_message}" if system_instruction else user_message

        return [
            types.Content(
                role="user",
                parts=[
                    types.Part(text=combined_message)
                ]
            )
        ]

    def generate_content(
        self,
        user_message: str,
        system_instruction: str = "",
        config: Optional[LLMConfig] = None
    ) -> LLMResponse:
        """
        Generate text for a prompt.

        Transport and service failures are not raised; they come back as
        ``LLMResponse(success=False, error=...)`` with the provider's message.
        """
        if config is None:
            config = LLMConfig()

        try:
            logger.info(f"Making LLM call with model: {config.model}, max tokens: {config.max_output_tokens}")

            generate_content_config = types.GenerateContentConfig(
                temperature=config.temperature,
                top_p=config.top_p,
                max_output_tokens=config.max_output_tokens,
            )

            response = self.client.models.generate_content(
                model=config.model,
                contents=self._create_contents(system_instruction, user_message),
                config=generate_content_config
            )

            content = response.text or ""
            logger.info(f"LLM call successful, response length: {len(content)}")

            return LLMResponse(
                success=True,
                content=content,
                raw_response=response,
            )

        except Exception as e:
            logger.error(f"LLM call failed: {e}")
            return LLMResponse(
                success=False,
                content="",
                raw_response=None,
                error=str(e),
            )


# Singleton instance
_llm_service_instance = None

def get_llm_service(settings: Settings) -> GeminiLLMService:
    """Get singleton instance of LLM service"""
    global _llm_service_instance
    if _llm_service_instance is None:
        _llm_service_instance = GeminiLLMService(
            api_key=settings.google_api_key,
            timeout_seconds=settings.llm_timeout_seconds,
        )
    return _llm_service_instance


def reset_llm_service() -> None:
    global _llm_service_instance
    _llm_service_instance = None
