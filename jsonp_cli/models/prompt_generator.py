"""
Prompt-template generation through a local Ollama server.
"""

import os
from typing import Any

import requests

from ..core.exceptions import ExternalCallError
from ..core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_TIMEOUT = 120
TIMEOUT_ENV = "OLLAMA_HTTP_TIMEOUT"

INSTRUCTION_TEMPLATE = """You are an expert prompt engineer. Based on the user's request, create a structured JSON prompt template that can be used to instruct another AI model effectively.

The JSON should contain the following fields:
- "task": A clear, concise description of what the AI should do
- "system_prompt": The system instructions for the AI (role, behavior, constraints)
- "user_prompt": The actual prompt to send to the AI (this should be detailed and well-crafted)
- "context": Any relevant background information or context
- "output_format": Expected output format (e.g., "markdown", "json", "plain text", "code")
- "constraints": Array of rules or limitations the AI should follow
- "examples": Optional array of example inputs/outputs if helpful
- "temperature": Suggested temperature setting (0.0-1.0)
- "max_tokens": Suggested max tokens for response

Make this prompt template professional, detailed, and optimized for the best AI response.
Output ONLY the valid JSON object, no additional text or markdown code blocks.

User's Request: "{request}\""""


def resolve_timeout(configured: int | None = None) -> int:
    """HTTP timeout in seconds; the environment override wins for slow models."""
    override = os.getenv(TIMEOUT_ENV)
    if override:
        try:
            return int(override)
        except ValueError:
            logger.warning(f"Ignoring non-integer {TIMEOUT_ENV}={override!r}")
    return configured or DEFAULT_TIMEOUT


class PromptGenerator:
    """Turns a free-text request into a JSON prompt template."""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, timeout: int | None = None):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = resolve_timeout(timeout)

    def build_prompt(self, prompt_text: str) -> str:
        return INSTRUCTION_TEMPLATE.format(request=prompt_text)

    def generate(self, prompt_text: str, model: str) -> str:
        """
        Ask ``model`` for a JSON prompt template describing ``prompt_text``.

        Args:
            prompt_text: The user's free-text request
            model: Ollama model tag, e.g. ``llama3:latest``

        Returns:
            The raw text the model produced

        Raises:
            ExternalCallError: If the server is unreachable, times out, answers
                with a non-2xx status, or returns something other than a JSON object
        """
        url = f"{self.endpoint}/api/generate"
        logger.debug(f"POST {url} model={model}")

        try:
            response = requests.post(
                url,
                json={"model": model, "prompt": self.build_prompt(prompt_text), "stream": False},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Ollama request timed out after {self.timeout}s")
            raise ExternalCallError(f"Request timed out after {self.timeout}s: {e}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Error connecting to Ollama: {e}")
            raise ExternalCallError(f"Failed to connect to Ollama at {self.endpoint}: {e}")

        logger.debug(f"Response {response.status_code}")
        if not response.ok:
            logger.error(f"Ollama API request failed with status {response.status_code}")
            raise ExternalCallError(
                f"API request failed ({response.status_code})", status_code=response.status_code
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise ExternalCallError(
                f"Ollama returned a non-JSON body: {e}", status_code=response.status_code
            )
        if not isinstance(payload, dict):
            raise ExternalCallError(
                "Ollama returned an unexpected response body", status_code=response.status_code
            )

        logger.info("Prompt generated successfully")
        return str(payload.get("response", ""))
