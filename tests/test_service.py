import json

import pytest
from docexplainer.analysis.orchestrator import AnalysisOrchestrator
from docexplainer.service import LegalDocService, error_response
from docexplainer.utils.config import AppConfig
from docexplainer.utils.exceptions import (
    DocumentTooLargeError,
    ExtractionError,
    InputValidationError,
    NotFoundError,
    UnsupportedDocumentError,
)

LEASE = b"Rental agreement. The tenant pays a security deposit. Lock-in period of 11 months."


class RecordingOrchestrator(AnalysisOrchestrator):
    def __init__(self):
        super().__init__(adapters=[])
        self.analyze_calls = 0
        self.questions = []

    def analyze(self, document_text, filename):
        self.analyze_calls += 1
        return super().analyze(document_text, filename)

    def answer_question(self, document_text, question, existing_summary=None):
        self.questions.append((question, existing_summary))
        return super().answer_question(document_text, question, existing_summary)


def make_service(**config):
    orch = RecordingOrchestrator()
    return LegalDocService(orch, config=AppConfig(**config)), orch


def test_upload_returns_envelope():
    service, orch = make_service()
    out = service.analyze_upload("lease.txt", "text/plain", LEASE)
    assert set(out) == {"document", "analysis"}
    assert out["document"]["filename"] == "lease.txt"
    assert out["document"]["type"] == "Residential Rental Agreement"
    analysis = out["analysis"]
    assert analysis["summary"]
    assert analysis["keyProvisions"]
    assert analysis["source"] == "heuristic"
    assert all(r["severity"] in {"high", "medium", "low"} for r in analysis["risks"])
    assert orch.analyze_calls == 1


@pytest.mark.parametrize(
    "filename,content_type,data,error",
    [
        ("a.txt", "text/plain", b"", InputValidationError),
        ("a.png", "image/png", b"png", UnsupportedDocumentError),
        ("a.txt", "text/plain", b"x" * 11, DocumentTooLargeError),
    ],
)
def test_input_errors_rejected_before_analysis(filename, content_type, data, error):
    service, orch = make_service(max_upload_bytes=10)
    with pytest.raises(error):
        service.analyze_upload(filename, content_type, data)
    assert orch.analyze_calls == 0


def test_empty_extraction_never_reaches_analysis():
    service, orch = make_service()
    with pytest.raises(ExtractionError):
        service.analyze_upload("blank.txt", "text/plain", b"   \n  ")
    assert orch.analyze_calls == 0


def test_get_analysis_and_not_found():
    service, _ = make_service()
    out = service.analyze_upload("lease.txt", "text/plain", LEASE)
    again = service.get_analysis(out["document"]["id"])
    assert again == out
    with pytest.raises(NotFoundError):
        service.get_analysis("missing")


def test_question_flow_and_history():
    service, orch = make_service()
    doc_id = service.analyze_upload("lease.txt", "text/plain", LEASE)["document"]["id"]
    qa = service.ask_question(doc_id, "  What is the lock-in period?  ")
    assert qa["question"] == "What is the lock-in period?"
    assert '"What is the lock-in period?"' in qa["answer"]
    assert set(qa) == {"id", "question", "answer", "createdAt"}
    assert orch.questions[0][1]  # stored summary passed as context
    service.ask_question(doc_id, "Can I leave early?")
    history = service.list_questions(doc_id)
    assert [h["question"] for h in history] == ["What is the lock-in period?", "Can I leave early?"]
    assert service.list_questions("missing") == []


@pytest.mark.parametrize("question", ["", "   ", None, 42])
def test_blank_question_rejected(question):
    service, orch = make_service()
    doc_id = service.analyze_upload("lease.txt", "text/plain", LEASE)["document"]["id"]
    with pytest.raises(InputValidationError):
        service.ask_question(doc_id, question)
    assert orch.questions == []


def test_question_for_unknown_document():
    service, _ = make_service()
    with pytest.raises(NotFoundError):
        service.ask_question("missing", "Anything?")


def test_error_response_mapping():
    assert error_response(NotFoundError("Document not found")) == (404, {"message": "Document not found"})
    assert error_response(DocumentTooLargeError("too big"))[0] == 413
    assert error_response(UnsupportedDocumentError("nope"))[0] == 415
    assert error_response(ExtractionError("bad pdf"))[0] == 422
    status, body = error_response(RuntimeError("secret internals"))
    assert status == 500
    assert "secret" not in body["message"]


def test_export_json_snapshot():
    service, _ = make_service()
    doc_id = service.analyze_upload("lease.txt", "text/plain", LEASE)["document"]["id"]
    service.ask_question(doc_id, "What is the lock-in period?")
    data = json.loads(service.export_json(doc_id, {"app": "test"}))
    assert data["meta"] == {"app": "test"}
    assert data["document"]["id"] == doc_id
    assert data["analysis"]["documentType"] == "Residential Rental Agreement"
    assert [q["question"] for q in data["qa_history"]] == ["What is the lock-in period?"]


def test_export_json_unknown_document():
    service, _ = make_service()
    with pytest.raises(NotFoundError):
        service.export_json("missing")
