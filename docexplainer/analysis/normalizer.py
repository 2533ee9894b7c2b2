from __future__ import annotations
from typing import List, Tuple
from docexplainer.analysis.rules import (
    BASE_RISK,
    BASE_TERM,
    DEFAULT_DOCUMENT_TYPE,
    DOCUMENT_TYPE_RULES,
    FALLBACK_PROVISIONS,
    PROVISION_RULES,
    RISK_RULES,
    TERM_RULES,
    matches,
)
from docexplainer.utils.types import AnalysisResult, LegalTerm, Risk

SUMMARY_MAX_CHARS = 1800
# responses up to this length are kept whole; longer ones are cut to SUMMARY_MAX_CHARS
SUMMARY_TRUNCATE_THRESHOLD = 2000
EMPTY_SUMMARY = "Analysis completed"


def truncate_summary(
    raw_text: str, max_chars: int = SUMMARY_MAX_CHARS, threshold: int = SUMMARY_TRUNCATE_THRESHOLD
) -> str:
    text = (raw_text or "").strip()
    if not text:
        return EMPTY_SUMMARY
    if len(text) > threshold:
        return text[:max_chars] + "..."
    return text


def classify_response(raw_text: str) -> str:
    low = (raw_text or "").lower()
    for keywords, doc_type in DOCUMENT_TYPE_RULES:
        if matches(keywords, low):
            return doc_type
    return DEFAULT_DOCUMENT_TYPE


def risks_for(document_text: str) -> Tuple[Risk, ...]:
    low = (document_text or "").lower()
    entries = [BASE_RISK] + [entry for keywords, entry in RISK_RULES if matches(keywords, low)]
    return tuple(
        Risk(
            id=f"risk_{i}",
            severity=entry["severity"],
            title=entry["title"],
            description=entry["description"],
            recommendation=entry["recommendation"],
            section=entry.get("section"),
        )
        for i, entry in enumerate(entries, start=1)
    )


def legal_terms_for(document_text: str) -> Tuple[LegalTerm, ...]:
    low = (document_text or "").lower()
    entries = [BASE_TERM] + [entry for keywords, entry in TERM_RULES if matches(keywords, low)]
    return tuple(LegalTerm(**entry) for entry in entries)


def key_provisions_for(document_text: str) -> Tuple[str, ...]:
    """Provision headings for keyword groups present in the document; never empty."""
    low = (document_text or "").lower()
    found: List[str] = [label for keywords, label in PROVISION_RULES if matches(keywords, low)]
    return tuple(found) if found else FALLBACK_PROVISIONS


def normalize_response(raw_text: str, document_text: str, source: str = "unknown") -> AnalysisResult:
    """Build an AnalysisResult from an unstructured model response.

    The summary and document type come from the response itself; risks, legal
    terms and key provisions are derived from the original document text.
    """
    return AnalysisResult(
        summary=truncate_summary(raw_text),
        risks=risks_for(document_text),
        legal_terms=legal_terms_for(document_text),
        document_type=classify_response(raw_text),
        key_provisions=key_provisions_for(document_text),
        source=source,
    )
