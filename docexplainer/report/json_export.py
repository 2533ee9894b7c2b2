from __future__ import annotations
import json
from typing import Any, Dict, List, Optional
from docexplainer.utils.types import Analysis, Document, QaInteraction


def analysis_response(document: Document, analysis: Analysis) -> Dict[str, Any]:
    """Envelope returned by the upload and get-analysis operations."""
    result = analysis.result.to_dict()
    return {
        "document": {
            "id": document.id,
            "filename": document.filename,
            "type": result["documentType"],
        },
        "analysis": {
            "id": analysis.id,
            "summary": result["summary"],
            "risks": result["risks"],
            "legalTerms": result["legalTerms"],
            "keyProvisions": result["keyProvisions"],
            "source": result["source"],
        },
    }


def qa_response(interaction: QaInteraction) -> Dict[str, Any]:
    return {
        "id": interaction.id,
        "question": interaction.question,
        "answer": interaction.answer,
        "createdAt": interaction.created_at.isoformat(),
    }


def build_analysis_json(
    document: Document,
    analysis: Optional[Analysis],
    qa_history: List[QaInteraction],
    meta: Dict[str, Any],
) -> str:
    """Return a structured JSON snapshot of one document's analysis and Q&A history.

    meta can include build/version timestamps, model info, etc.
    """
    payload = {
        "meta": meta,
        "document": {
            "id": document.id,
            "filename": document.filename,
            "contentType": document.content_type,
            "pages": document.pages,
            "title": document.title,
            "uploadedAt": document.uploaded_at.isoformat(),
        },
        "analysis": analysis.result.to_dict() if analysis else None,
        "qa_history": [qa_response(q) for q in qa_history],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)
