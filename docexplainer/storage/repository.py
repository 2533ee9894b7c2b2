from __future__ import annotations
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional
from docexplainer.utils.types import Analysis, AnalysisResult, Document, ParsedDocument, QaInteraction


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentRepository(ABC):
    """Append-only store for documents, their analysis and Q&A history.

    Lookups of unknown ids return None (or an empty list), never raise.
    """

    @abstractmethod
    def create_document(self, filename: str, content_type: str, parsed: ParsedDocument) -> Document: ...

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]: ...

    @abstractmethod
    def create_analysis(self, document_id: str, result: AnalysisResult) -> Analysis: ...

    @abstractmethod
    def get_analysis_by_document_id(self, document_id: str) -> Optional[Analysis]: ...

    @abstractmethod
    def create_qa_interaction(self, document_id: str, question: str, answer: str) -> QaInteraction: ...

    @abstractmethod
    def get_qa_interactions_by_document_id(self, document_id: str) -> List[QaInteraction]: ...


class InMemoryRepository(DocumentRepository):
    """Process-lifetime storage backed by dicts."""

    def __init__(self):
        self._lock = threading.Lock()
        self._documents: Dict[str, Document] = {}
        self._analyses: Dict[str, Analysis] = {}
        self._analysis_by_document: Dict[str, str] = {}
        self._qa: Dict[str, List[QaInteraction]] = {}

    def create_document(self, filename: str, content_type: str, parsed: ParsedDocument) -> Document:
        doc = Document(
            id=_new_id(),
            filename=filename,
            content_type=content_type,
            content=parsed.content,
            pages=parsed.pages,
            title=parsed.title,
            uploaded_at=_now(),
        )
        with self._lock:
            self._documents[doc.id] = doc
        return doc

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def create_analysis(self, document_id: str, result: AnalysisResult) -> Analysis:
        analysis = Analysis(id=_new_id(), document_id=document_id, result=result, created_at=_now())
        with self._lock:
            self._analyses[analysis.id] = analysis
            # first analysis for a document stays the canonical one
            self._analysis_by_document.setdefault(document_id, analysis.id)
        return analysis

    def get_analysis_by_document_id(self, document_id: str) -> Optional[Analysis]:
        analysis_id = self._analysis_by_document.get(document_id)
        return self._analyses.get(analysis_id) if analysis_id else None

    def create_qa_interaction(self, document_id: str, question: str, answer: str) -> QaInteraction:
        interaction = QaInteraction(
            id=_new_id(), document_id=document_id, question=question, answer=answer, created_at=_now()
        )
        with self._lock:
            self._qa.setdefault(document_id, []).append(interaction)
        return interaction

    def get_qa_interactions_by_document_id(self, document_id: str) -> List[QaInteraction]:
        with self._lock:
            return list(self._qa.get(document_id, []))
