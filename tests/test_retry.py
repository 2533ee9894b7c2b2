import pytest
from docexplainer.llm.base import ProviderAdapter
from docexplainer.llm.retry import RetryingAdapter
from docexplainer.utils.exceptions import ProviderError


class FlakyAdapter(ProviderAdapter):
    name = "flaky"

    def __init__(self, failures):
        self.failures = failures
        self.calls = 0

    def answer(self, document_text, question, context=None):
        self.calls += 1
        if self.calls <= self.failures:
            raise ProviderError(self.name, "503")
        return "answer"


def test_retry_recovers_after_transient_failure():
    sleeps = []
    inner = FlakyAdapter(failures=1)
    wrapped = RetryingAdapter(inner, attempts=3, backoff=0.5, sleep=sleeps.append)
    assert wrapped.answer("doc", "q") == "answer"
    assert inner.calls == 2
    assert sleeps == [0.5]


def test_retry_gives_up_after_attempts():
    sleeps = []
    inner = FlakyAdapter(failures=10)
    wrapped = RetryingAdapter(inner, attempts=3, backoff=1.0, sleep=sleeps.append)
    with pytest.raises(ProviderError):
        wrapped.answer("doc", "q")
    assert inner.calls == 3
    assert sleeps == [1.0, 2.0]
