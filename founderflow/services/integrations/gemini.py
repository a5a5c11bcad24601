"""
Gemini text generation.
"""
import base64
import logging
from typing import Optional

import google.generativeai as genai

from founderflow.services.integrations.base import MessageGenerator

logger = logging.getLogger(__name__)


class GeminiMessageGenerator(MessageGenerator):
    """
    Gemini-backed generator. Multimodal, so a resume PDF is passed
    inline next to the prompt instead of being transcribed.
    """

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash"):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.client = genai.GenerativeModel(model_name)
        logger.info(f"Gemini generator initialized with model {model_name}")

    async def generate(self, prompt: str, pdf_base64: Optional[str] = None) -> str:
        parts = []
        if pdf_base64:
            parts.append({
                "mime_type": "application/pdf",
                "data": base64.b64decode(pdf_base64)
            })
        parts.append(prompt)

        # Single attempt; the caller reports failures instead of retrying
        response = await self.client.generate_content_async(parts)
        return response.text
