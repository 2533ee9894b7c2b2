from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

SEVERITIES = ("high", "medium", "low")


@dataclass(frozen=True)
class Risk:
    id: str
    severity: str
    title: str
    description: str
    recommendation: str
    section: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "severity": self.severity,
            "title": self.title,
            "description": self.description,
            "recommendation": self.recommendation,
        }
        if self.section:
            out["section"] = self.section
        return out


@dataclass(frozen=True)
class LegalTerm:
    term: str
    definition: str
    context: str

    def to_dict(self) -> Dict[str, Any]:
        return {"term": self.term, "definition": self.definition, "context": self.context}


@dataclass(frozen=True)
class AnalysisResult:
    """Canonical output of one analysis attempt, whichever tier produced it."""
    summary: str
    risks: Tuple[Risk, ...] = ()
    legal_terms: Tuple[LegalTerm, ...] = ()
    document_type: str = "Legal Document"
    key_provisions: Tuple[str, ...] = ()
    source: str = "unknown"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "risks": [r.to_dict() for r in self.risks],
            "legalTerms": [t.to_dict() for t in self.legal_terms],
            "documentType": self.document_type,
            "keyProvisions": list(self.key_provisions),
            "source": self.source,
        }


@dataclass(frozen=True)
class ParsedDocument:
    content: str
    pages: int
    title: Optional[str] = None


@dataclass(frozen=True)
class Document:
    id: str
    filename: str
    content_type: str
    content: str
    pages: int
    uploaded_at: datetime
    title: Optional[str] = None


@dataclass(frozen=True)
class Analysis:
    id: str
    document_id: str
    result: AnalysisResult
    created_at: datetime


@dataclass(frozen=True)
class QaInteraction:
    id: str
    document_id: str
    question: str
    answer: str
    created_at: datetime
