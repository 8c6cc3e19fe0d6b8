"""
Gemini client module

Usage:
    from studygenie.services.infrastructure.llm.gemini import create_client
"""

from .client import create_client, UnifiedGeminiClient, GenerationConfig

__all__ = [
    "create_client",
    "UnifiedGeminiClient",
    "GenerationConfig",
]
