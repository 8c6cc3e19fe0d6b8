"""LLM infrastructure - Gemini client and prompting engine."""

from .prompting_engine import PromptingEngine, PromptConfig, PromptTemplate

__all__ = ["PromptingEngine", "PromptConfig", "PromptTemplate"]
