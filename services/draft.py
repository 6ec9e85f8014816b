import json
import logging

import httpx

from models import EmailRequest
from .llm import generate_content

logger = logging.getLogger(__name__)

INSTRUCTION = (
    "Generate a professional email reply for the following content. "
    "Please do not generate a subject line "
)
ERROR_PREFIX = "Error processing request:"


def build_prompt(request: EmailRequest) -> str:
    prompt = INSTRUCTION
    if request.tone:
        prompt += f"Use a {request.tone} tone."
    prompt += "\nOriginal email: \n" + request.email_content
    return prompt


def build_request_body(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_response_content(raw: str) -> str:
    """Pull candidates[0].content.parts[0].text out of a Gemini response.

    Any parse or shape problem comes back as an error string instead of an
    exception.
    """
    try:
        data = json.loads(raw)
        text = data["candidates"][0]["content"]["parts"][0]["text"]
        if not isinstance(text, str):
            raise TypeError(f"reply text is {type(text).__name__}, not str")
        return text
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning("⚠️ Could not extract reply from Gemini response: %r", e)
        return f"{ERROR_PREFIX}{e}"


async def generate_email_reply(request: EmailRequest) -> str:
    prompt = build_prompt(request)
    try:
        raw = await generate_content(build_request_body(prompt))
    except httpx.HTTPStatusError as e:
        # str(e) carries the request URL, and with it the API key
        message = f"{e.response.status_code} {e.response.reason_phrase}"
        logger.error("🚨 Gemini request failed: %s", message)
        return f"{ERROR_PREFIX}{message}"
    except httpx.HTTPError as e:
        logger.error("🚨 Gemini request failed: %s", e)
        return f"{ERROR_PREFIX}{e}"
    return extract_response_content(raw)
