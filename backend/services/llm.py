"""
Groq LLM Integration (JSON mode)
- Sends a prompt and returns the parsed JSON object from the reply
- Falls back through an ordered list of models when one is rate limited

Only rate limiting moves on to the next model. Any other API failure, or a
reply that is not a JSON object, aborts with GenerationError.
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

import groq
from groq import Groq
from dotenv import load_dotenv

from services.exceptions import GenerationError

logger = logging.getLogger(__name__)

DEFAULT_MODELS = ("llama-3.1-8b-instant", "gemma2-9b-it")


@dataclass(frozen=True)
class LLMConfig:
    api_key: Optional[str] = None
    models: tuple[str, ...] = DEFAULT_MODELS
    base_url: Optional[str] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "LLMConfig":
        load_dotenv()
        models = tuple(
            m.strip() for m in os.getenv("GROQ_MODELS", "").split(",") if m.strip()
        )
        return cls(
            api_key=os.getenv("GROQ_API_KEY") or None,
            models=models or DEFAULT_MODELS,
            base_url=os.getenv("GROQ_BASE_URL") or None,
        )


def parse_json_object(raw: str) -> dict:
    """
    Parses the model reply into a dict. Tolerates markdown fences and stray
    text around a single JSON object.
    """
    raw = (raw or "").strip()
    raw = re.sub(r"^```(?:json)?\s*", "", raw)
    raw = re.sub(r"\s*```$", "", raw)

    try:
        result = json.loads(raw)
    except json.JSONDecodeError:
        # Attempt to extract JSON object from mixed response
        match = re.search(r'\{[\s\S]*\}', raw)
        if not match:
            raise GenerationError("Model returned non-JSON content")
        try:
            result = json.loads(match.group())
        except json.JSONDecodeError as e:
            raise GenerationError(f"Model returned malformed JSON: {e}") from e

    if not isinstance(result, dict):
        raise GenerationError("Model returned JSON that is not an object")
    return result


class GroqJSONGenerator:
    """
    Text-generation collaborator: prompt in, parsed JSON object out.

    Usage:
        generator = GroqJSONGenerator(LLMConfig.from_env())
        data = generator.generate_json(prompt, max_tokens=2000, temperature=0.3)
    """

    def __init__(self, config: LLMConfig, client: Optional[Groq] = None):
        self.config = config
        self._client = client

    def get_client(self) -> Groq:
        if self._client is None:
            if not self.config.api_key:
                raise GenerationError("GROQ_API_KEY not set in environment / .env file")
            # Fallback to the next model is the retry policy; the SDK must not retry 429s itself.
            self._client = Groq(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                max_retries=0,
            )
        return self._client

    def generate_json(self, prompt: str, max_tokens: int = 3000, temperature: float = 0.1) -> dict:
        client = self.get_client()

        for model in self.config.models:
            try:
                response = client.chat.completions.create(
                    model=model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=temperature,
                    max_tokens=max_tokens,
                    response_format={"type": "json_object"},
                )
            except groq.RateLimitError:
                logger.warning("Rate limited on %s, trying next model...", model)
                continue
            except groq.APIError as e:
                logger.error("Error with %s: %s", model, e)
                raise GenerationError(f"API error from {model}: {e}") from e

            content = response.choices[0].message.content if response.choices else None
            logger.info("Completed using model: %s", model)
            return parse_json_object(content or "{}")

        raise GenerationError("Rate limit exceeded on all models")
