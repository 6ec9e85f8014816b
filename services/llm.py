import os, httpx, logging

logger = logging.getLogger(__name__)

GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent?key=",
)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60"))


async def generate_content(body: dict) -> str:
    """POST a generateContent body to Gemini and return the raw response text.

    Raises httpx.HTTPStatusError on a non-2xx status and httpx.TransportError
    when the provider can't be reached.
    """
    headers = {"Content-Type": "application/json"}

    async with httpx.AsyncClient(timeout=TIMEOUT) as client:
        r = await client.post(f"{GEMINI_API_URL}{GEMINI_API_KEY}", headers=headers, json=body)
        if r.is_error:
            logger.error("🚨 Gemini HTTP error: %s → %s", r.status_code, r.text[:200])
        r.raise_for_status()
        logger.debug("🧠 Gemini raw: %s", r.text[:500])
        return r.text
