from __future__ import annotations
from pathlib import Path
from typing import Optional
from docexplainer.utils.types import AnalysisResult

PROMPT_DIR = Path(__file__).resolve().parent.parent / "prompts"


def load_prompt(name: str) -> str:
    with open(PROMPT_DIR / name, "r", encoding="utf-8") as f:
        return f.read()


def excerpt(text: str, budget: int) -> str:
    return (text or "")[:budget]


class ProviderAdapter:
    """One LLM provider behind the analyze/answer contract.

    Implementations raise ``ProviderError`` for any failure and never retry;
    retry belongs to ``RetryingAdapter`` and fallback to the orchestrator.
    """
    name = "provider"

    def analyze(self, document_text: str, filename: str) -> AnalysisResult:
        raise NotImplementedError

    def answer(self, document_text: str, question: str, context: Optional[str] = None) -> str:
        raise NotImplementedError
