from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Set
from openai import OpenAI
from docexplainer.analysis.normalizer import key_provisions_for
from docexplainer.llm.base import ProviderAdapter, excerpt, load_prompt
from docexplainer.utils.config import AppConfig
from docexplainer.utils.exceptions import ProviderError
from docexplainer.utils.logger import logger
from docexplainer.utils.types import SEVERITIES, AnalysisResult, LegalTerm, Risk

ANALYSIS_TEMPLATE = load_prompt("analysis_json.txt")
QA_TEMPLATE = load_prompt("qa_openai.txt")

ANALYSIS_SYSTEM = (
    "You are an expert legal analyst specializing in Indian law. Analyze documents thoroughly and "
    "provide clear, actionable insights for non-legal professionals."
)
QA_SYSTEM = (
    "You are a legal expert specializing in Indian law. Answer questions about legal documents in "
    "clear, plain English that non-lawyers can understand."
)
DEFAULT_RECOMMENDATION = "Review this clause with a qualified lawyer before signing."
UNKNOWN_TYPE = "Unknown"


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _parse_risks(items: Any) -> List[Risk]:
    risks: List[Risk] = []
    used: Set[str] = set()
    for item in items if isinstance(items, list) else []:
        if not isinstance(item, dict):
            continue
        title = _text(item.get("title"))
        if not title:
            continue
        severity = _text(item.get("severity") or item.get("type")).lower()
        if severity not in SEVERITIES:
            severity = "medium"
        risk_id = _text(item.get("id"))
        if not risk_id or risk_id in used:
            n = len(risks) + 1
            while f"risk_{n}" in used:
                n += 1
            risk_id = f"risk_{n}"
        used.add(risk_id)
        risks.append(Risk(
            id=risk_id,
            severity=severity,
            title=title,
            description=_text(item.get("description")) or title,
            recommendation=_text(item.get("recommendation")) or DEFAULT_RECOMMENDATION,
            section=_text(item.get("section")) or None,
        ))
    return risks


def _parse_terms(items: Any) -> List[LegalTerm]:
    terms: List[LegalTerm] = []
    seen: Set[str] = set()
    for item in items if isinstance(items, list) else []:
        if not isinstance(item, dict):
            continue
        term = _text(item.get("term"))
        if not term or term.lower() in seen:
            continue
        seen.add(term.lower())
        terms.append(LegalTerm(
            term=term,
            definition=_text(item.get("definition")),
            context=_text(item.get("context")),
        ))
    return terms


def _parse_provisions(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [p.strip() for p in value if isinstance(p, str) and p.strip()]


def parse_analysis_json(raw: Optional[str], document_text: str, source: str = "openai") -> AnalysisResult:
    """Parse a JSON-mode response permissively.

    Only ``summary`` is required; anything else missing falls back to an empty
    collection or ``"Unknown"``. An empty provision list is filled from the
    document's own keyword scan.
    """
    try:
        data = json.loads(raw or "")
    except (TypeError, ValueError) as e:
        raise ProviderError(source, f"malformed JSON: {e}") from e
    if not isinstance(data, dict):
        raise ProviderError(source, "response is not a JSON object")
    summary = _text(data.get("summary"))
    if not summary:
        raise ProviderError(source, "response missing 'summary'")
    provisions = _parse_provisions(data.get("keyProvisions"))
    return AnalysisResult(
        summary=summary,
        risks=tuple(_parse_risks(data.get("risks"))),
        legal_terms=tuple(_parse_terms(data.get("legalTerms"))),
        document_type=_text(data.get("documentType")) or UNKNOWN_TYPE,
        key_provisions=tuple(provisions) if provisions else key_provisions_for(document_text),
        source=source,
    )


class OpenAIJsonAdapter(ProviderAdapter):
    name = "openai"

    def __init__(self, config: AppConfig, client=None):
        self.config = config
        if client is None:
            if not config.openai_api_key:
                raise ValueError("OPENAI_API_KEY not set")
            client = OpenAI(api_key=config.openai_api_key, timeout=config.provider_timeout, max_retries=0)
        self.client = client

    def _complete(self, messages: List[Dict[str, str]], max_tokens: int, json_mode: bool) -> str:
        kwargs: Dict[str, Any] = {
            "model": self.config.openai_model,
            "messages": messages,
            "temperature": self.config.temperature,
            "max_tokens": max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(**kwargs)
            content = response.choices[0].message.content
        except Exception as e:  # network, auth, quota, timeout
            raise ProviderError(self.name, f"completion failed: {e}") from e
        if not content or not content.strip():
            raise ProviderError(self.name, "empty response")
        return content

    def analyze(self, document_text: str, filename: str) -> AnalysisResult:
        prompt = ANALYSIS_TEMPLATE.format(
            filename=filename,
            excerpt=excerpt(document_text, self.config.json_analysis_chars),
        )
        logger.debug("openai analysis prompt: %d chars", len(prompt))
        raw = self._complete(
            [{"role": "system", "content": ANALYSIS_SYSTEM}, {"role": "user", "content": prompt}],
            self.config.max_tokens,
            json_mode=True,
        )
        return parse_analysis_json(raw, document_text, source=self.name)

    def answer(self, document_text: str, question: str, context: Optional[str] = None) -> str:
        prompt = QA_TEMPLATE.format(
            excerpt=excerpt(document_text, self.config.json_qa_chars),
            context=f"Previous analysis: {context}\n" if context else "",
            question=question,
        )
        return self._complete(
            [{"role": "system", "content": QA_SYSTEM}, {"role": "user", "content": prompt}],
            self.config.qa_max_tokens,
            json_mode=False,
        ).strip()
