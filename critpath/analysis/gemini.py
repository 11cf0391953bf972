"""Gemini-backed schedule risk analyzer.

Uses the google-genai library with JSON structured output. Rate limit and
temporary server errors are retried with exponential backoff.
"""

import json
import logging
import os
import random
import time
from typing import Callable, List, TypeVar

from dotenv import load_dotenv
from google import genai

from ..models.task import ScheduleRisk
from .base import (
    RiskAnalysisError,
    RiskAnalyzer,
    RiskRequest,
    build_risk_prompt,
    parse_risks,
    risk_response_schema,
)

load_dotenv()

logger = logging.getLogger(__name__)

# Error patterns that indicate rate limiting or a temporary failure
RETRYABLE_ERROR_PATTERNS = [
    "429",
    "resource_exhausted",
    "rate limit",
    "quota exceeded",
    "too many requests",
    "overloaded",
    "temporarily unavailable",
    "503",
    "500",
    "internal error",
]

T = TypeVar('T')


def _is_retryable_api_error(error: Exception) -> bool:
    error_str = str(error).lower()
    return any(pattern in error_str for pattern in RETRYABLE_ERROR_PATTERNS)


def _get_client() -> genai.Client:
    """Get authenticated Gemini client."""
    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    if not api_key:
        raise RiskAnalysisError("No API key found. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env")
    return genai.Client(api_key=api_key)


class GeminiRiskAnalyzer(RiskAnalyzer):
    """Risk analyzer that asks a Gemini model for schedule risks."""

    def __init__(self, config: dict, client: genai.Client = None, sleep: Callable[[float], None] = time.sleep):
        """Initialize analyzer; the client is created lazily when not given."""
        super().__init__(config)
        self.model = self.risk_config.get('model', 'gemini-2.5-flash')
        self.temperature = self.risk_config.get('temperature', 0.6)
        self.max_attempts = self.risk_config.get('retry_max_attempts', 5)
        self.base_delay = self.risk_config.get('retry_base_delay_seconds', 1.0)
        self.max_delay = self.risk_config.get('retry_max_delay_seconds', 60.0)
        self._client = client
        self._sleep = sleep

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = _get_client()
        return self._client

    def analyze(self, request: RiskRequest) -> List[ScheduleRisk]:
        """Ask the model for risks along the critical path."""
        prompt = build_risk_prompt(request, self.max_risks)
        config = {
            "response_mime_type": "application/json",
            "response_schema": risk_response_schema(),
            "temperature": self.temperature,
        }

        try:
            response = self._call_with_retry(
                lambda: self.client.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=config,
                ),
                operation_name="schedule risk analysis",
            )
        except RiskAnalysisError:
            raise
        except Exception as e:
            logger.error(f"Error analyzing schedule risks: {e}")
            raise RiskAnalysisError(f"Gemini API Error: {e}") from e

        try:
            payload = json.loads((response.text or '').strip())
        except json.JSONDecodeError as e:
            raise RiskAnalysisError(f"Failed to parse JSON response: {e}") from e

        risks = parse_risks(payload)
        logger.info(f"Received {len(risks)} schedule risks from {self.model}")
        return risks

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with up to 25% jitter, capped at max_delay."""
        delay = self.base_delay * (2 ** attempt)
        delay += delay * random.uniform(0, 0.25)
        return min(delay, self.max_delay)

    def _call_with_retry(self, api_call: Callable[[], T], operation_name: str = "API call") -> T:
        """Execute an API call, retrying only on rate limit style errors."""
        for attempt in range(self.max_attempts):
            try:
                return api_call()
            except Exception as e:
                if not _is_retryable_api_error(e):
                    raise
                if attempt == self.max_attempts - 1:
                    logger.error(
                        f"Max retries ({self.max_attempts}) exhausted for {operation_name}. "
                        f"Last error: {str(e)[:200]}"
                    )
                    raise

                delay = self._backoff_delay(attempt)
                logger.warning(
                    f"Rate limit hit on {operation_name} (attempt {attempt + 1}/{self.max_attempts}). "
                    f"Retrying in {delay:.1f}s. Error: {str(e)[:100]}"
                )
                self._sleep(delay)

        raise RiskAnalysisError(f"No attempts made for {operation_name}")

    def get_analyzer_name(self) -> str:
        return f"GEMINI ({self.model})"
