"""
Base interfaces for integration providers.
"""
from abc import ABC, abstractmethod
from typing import Optional


class MessageGenerator(ABC):
    """Base interface for text generation providers (Gemini, ...)."""

    @abstractmethod
    async def generate(self, prompt: str, pdf_base64: Optional[str] = None) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Fully composed instructions
            pdf_base64: Optional resume PDF, attached to the call as a document

        Returns:
            The generated text
        """
        pass
