from __future__ import annotations
import time
from typing import Callable, Optional, TypeVar
from docexplainer.llm.base import ProviderAdapter
from docexplainer.utils.exceptions import ProviderError
from docexplainer.utils.logger import logger
from docexplainer.utils.types import AnalysisResult

T = TypeVar("T")


class RetryingAdapter(ProviderAdapter):
    """Retries a single provider a bounded number of times before giving up.

    Wraps one adapter so that the orchestrator still sees exactly one tier per
    provider; only after the last attempt fails does the cascade move on.
    """

    def __init__(self, inner: ProviderAdapter, attempts: int = 2, backoff: float = 1.0, sleep=time.sleep):
        self.inner = inner
        self.name = inner.name
        self.attempts = max(1, attempts)
        self.backoff = backoff
        self._sleep = sleep

    def _call(self, fn: Callable[[], T]) -> T:
        last_err: Optional[ProviderError] = None
        for attempt in range(1, self.attempts + 1):
            try:
                return fn()
            except ProviderError as e:
                last_err = e
                logger.info("%s attempt %d/%d failed: %s", self.name, attempt, self.attempts, e)
                if attempt < self.attempts:
                    self._sleep(self.backoff * attempt)
        raise last_err  # type: ignore[misc]

    def analyze(self, document_text: str, filename: str) -> AnalysisResult:
        return self._call(lambda: self.inner.analyze(document_text, filename))

    def answer(self, document_text: str, question: str, context: Optional[str] = None) -> str:
        return self._call(lambda: self.inner.answer(document_text, question, context))
