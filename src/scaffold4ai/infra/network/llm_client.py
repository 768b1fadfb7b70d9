from __future__ import annotations

"""
Layout Generation Client.

Sends the project description to an OpenAI-compatible chat-completions
endpoint and returns the raw tree drawing from the first choice. Every
failure (transport, HTTP status, payload shape) is logged and reported as an
empty string so the caller can offer a retry.
"""

import logging
from typing import Any, Dict, Optional

import requests

from scaffold4ai.core.layout.normalizer import strip_code_fences
from scaffold4ai.domain.config import LLMSettings
from scaffold4ai.domain.constants import LAYOUT_PROMPT_TEMPLATE
from scaffold4ai.infra.network.common import USER_AGENT, truncate_body

logger = logging.getLogger(__name__)


def build_layout_prompt(description: str) -> str:
    """Embed the user's project description into the formatting instructions."""
    return LAYOUT_PROMPT_TEMPLATE.format(prompt=description)


def build_request_payload(description: str, settings: LLMSettings) -> Dict[str, Any]:
    return {
        "model": settings.model,
        "messages": [
            {"role": "user", "content": build_layout_prompt(description)},
        ],
        "temperature": settings.temperature,
    }


def request_project_layout(description: str, settings: LLMSettings) -> str:
    """
    Ask the model for a project layout matching the description.

    Args:
        description: Free-text description of the project.
        settings: Endpoint, model and credentials.

    Returns:
        str: The tree drawing with surrounding fences removed, or "" on failure.
    """
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    payload = build_request_payload(description, settings)

    logger.debug(f"Network: Sending layout request to {settings.api_url} (model={settings.model}).")

    try:
        response = requests.post(
            settings.api_url,
            json=payload,
            headers=headers,
            timeout=settings.timeout,
        )
    except requests.exceptions.Timeout:
        logger.error(f"Network: Layout request timed out after {settings.timeout}s.")
        return ""
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: API request error: {e}")
        return ""

    if response.status_code != 200:
        logger.error(
            f"Network: API request failed with status {response.status_code}. "
            f"Response: {truncate_body(response.text)}"
        )
        return ""

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Network: Malformed JSON in API response: {e}")
        return ""

    content = _extract_content(data)
    if content is None:
        logger.debug(f"Network: No message content in API response: {truncate_body(response.text)}")
        return ""

    return strip_code_fences(content)


def _extract_content(data: Any) -> Optional[str]:
    """Return choices[0].message.content when the payload has that shape."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str):
        return None
    return content
