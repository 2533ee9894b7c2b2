from __future__ import annotations
import dataclasses
from typing import List, Optional, Sequence
from docexplainer.analysis.heuristic import HeuristicAnalyzer
from docexplainer.llm.base import ProviderAdapter
from docexplainer.llm.gemini import GeminiAdapter
from docexplainer.llm.openai_json import OpenAIJsonAdapter
from docexplainer.llm.retry import RetryingAdapter
from docexplainer.utils.config import AppConfig
from docexplainer.utils.logger import logger
from docexplainer.utils.types import AnalysisResult

QA_FALLBACK = (
    "I'm currently unable to analyze your question about \"{question}\" due to API limitations. "
    "However, based on the document type, I recommend consulting with a legal professional who "
    "specializes in Indian law for specific legal advice."
)


class AnalysisOrchestrator:
    """Runs providers in priority order and falls back to the heuristic tier.

    Providers are tried one at a time; the first that returns wins. Neither
    ``analyze`` nor ``answer_question`` raises because of a provider failure.
    """

    def __init__(self, adapters: Sequence[ProviderAdapter], heuristic: Optional[HeuristicAnalyzer] = None):
        self.adapters: List[ProviderAdapter] = list(adapters)
        self.heuristic = heuristic or HeuristicAnalyzer()

    def analyze(self, document_text: str, filename: str) -> AnalysisResult:
        for adapter in self.adapters:
            try:
                result = adapter.analyze(document_text, filename)
            except Exception as e:
                logger.warning("Analysis with %s failed, trying next tier: %s", adapter.name, e)
                continue
            logger.info("Analysis of %s produced by %s", filename, adapter.name)
            return dataclasses.replace(result, source=adapter.name)
        logger.info("All providers failed for %s; using heuristic analysis", filename)
        return self.heuristic.analyze(document_text, filename)

    def answer_question(self, document_text: str, question: str, existing_summary: Optional[str] = None) -> str:
        for adapter in self.adapters:
            try:
                answer = adapter.answer(document_text, question, existing_summary)
            except Exception as e:
                logger.warning("Q&A with %s failed, trying next tier: %s", adapter.name, e)
                continue
            if answer:
                return answer
            logger.warning("Q&A with %s returned an empty answer", adapter.name)
        logger.info("All providers failed for question; returning fallback answer")
        return QA_FALLBACK.format(question=question)


def _wrap(adapter: ProviderAdapter, config: AppConfig) -> ProviderAdapter:
    if config.provider_max_retries > 0:
        return RetryingAdapter(adapter, attempts=config.provider_max_retries + 1, backoff=config.retry_backoff)
    return adapter


def build_adapters(config: AppConfig) -> List[ProviderAdapter]:
    """Provider A (Gemini, free text) then Provider B (OpenAI, JSON mode); unusable ones are skipped."""
    adapters: List[ProviderAdapter] = []
    candidates = [
        (config.use_gemini, GeminiAdapter),
        (config.use_openai, OpenAIJsonAdapter),
    ]
    for enabled, cls in candidates:
        if not enabled:
            continue
        try:
            adapters.append(_wrap(cls(config), config))
        except Exception as e:
            logger.warning("%s provider unavailable: %s", cls.name, e)
    return adapters


def build_orchestrator(config: AppConfig) -> AnalysisOrchestrator:
    return AnalysisOrchestrator(build_adapters(config))
