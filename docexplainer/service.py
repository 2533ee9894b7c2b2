"""Upload/analyze and question workflows shaped like the HTTP API.

Framework-agnostic: a web layer passes parsed request data in, serializes the
returned dicts, and turns raised errors into responses with ``error_response``.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from docexplainer.analysis.orchestrator import AnalysisOrchestrator, build_orchestrator
from docexplainer.ingest.document_loader import SUPPORTED_TYPES, load_document
from docexplainer.report.json_export import analysis_response, build_analysis_json, qa_response
from docexplainer.storage.repository import DocumentRepository, InMemoryRepository
from docexplainer.utils.config import AppConfig
from docexplainer.utils.exceptions import (
    DocumentTooLargeError,
    InputValidationError,
    LegalDocError,
    NotFoundError,
    UnsupportedDocumentError,
)
from docexplainer.utils.logger import logger


class LegalDocService:
    def __init__(
        self,
        orchestrator: AnalysisOrchestrator,
        repository: Optional[DocumentRepository] = None,
        config: Optional[AppConfig] = None,
    ):
        self.orchestrator = orchestrator
        self.repository = repository or InMemoryRepository()
        self.config = config or AppConfig()

    def _validate_upload(self, filename: str, content_type: str, data: Optional[bytes]) -> None:
        if not data or not filename:
            raise InputValidationError("No file uploaded")
        if content_type not in SUPPORTED_TYPES:
            raise UnsupportedDocumentError("Only PDF, DOC, DOCX, and text files are allowed")
        if len(data) > self.config.max_upload_bytes:
            limit_mb = self.config.max_upload_bytes / (1024 * 1024)
            raise DocumentTooLargeError(f"File too large. Maximum size is {limit_mb:g} MB.")

    def analyze_upload(self, filename: str, content_type: str, data: Optional[bytes]) -> Dict[str, Any]:
        self._validate_upload(filename, content_type, data)
        parsed = load_document(data, content_type)
        document = self.repository.create_document(filename, content_type, parsed)
        result = self.orchestrator.analyze(parsed.content, filename)
        analysis = self.repository.create_analysis(document.id, result)
        logger.info("Stored analysis %s for document %s (source=%s)", analysis.id, document.id, result.source)
        return analysis_response(document, analysis)

    def get_analysis(self, document_id: str) -> Dict[str, Any]:
        document = self.repository.get_document(document_id)
        if document is None:
            raise NotFoundError("Document not found")
        analysis = self.repository.get_analysis_by_document_id(document.id)
        if analysis is None:
            raise NotFoundError("Analysis not found")
        return analysis_response(document, analysis)

    def ask_question(self, document_id: str, question: Any) -> Dict[str, Any]:
        if not isinstance(question, str) or not question.strip():
            raise InputValidationError("Question is required")
        question = question.strip()
        document = self.repository.get_document(document_id)
        if document is None:
            raise NotFoundError("Document not found")
        analysis = self.repository.get_analysis_by_document_id(document.id)
        summary = analysis.result.summary if analysis else None
        answer = self.orchestrator.answer_question(document.content, question, summary)
        interaction = self.repository.create_qa_interaction(document.id, question, answer)
        return qa_response(interaction)

    def list_questions(self, document_id: str) -> List[Dict[str, Any]]:
        return [qa_response(q) for q in self.repository.get_qa_interactions_by_document_id(document_id)]

    def export_json(self, document_id: str, meta: Optional[Dict[str, Any]] = None) -> str:
        """JSON snapshot of a document, its analysis and Q&A history for download."""
        document = self.repository.get_document(document_id)
        if document is None:
            raise NotFoundError("Document not found")
        return build_analysis_json(
            document,
            self.repository.get_analysis_by_document_id(document.id),
            self.repository.get_qa_interactions_by_document_id(document.id),
            meta or {},
        )


def error_response(exc: Exception) -> Tuple[int, Dict[str, str]]:
    """Map an exception to (status, {"message": ...}) for the web layer."""
    if isinstance(exc, LegalDocError):
        return exc.status_code, {"message": exc.message}
    logger.exception("Unexpected error while handling request: %s", exc)
    return 500, {"message": "Document analysis failed. Please try again."}


def build_service(config: Optional[AppConfig] = None) -> LegalDocService:
    config = config or AppConfig.from_env()
    return LegalDocService(build_orchestrator(config), InMemoryRepository(), config)
