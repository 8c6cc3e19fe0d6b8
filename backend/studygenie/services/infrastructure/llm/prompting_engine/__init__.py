"""Prompting engine - centralized LLM interaction."""

from .base_engine import PromptingEngine, PromptConfig
from .prompts import PromptTemplate

__all__ = ["PromptingEngine", "PromptConfig", "PromptTemplate"]
