"""Quick smoke test for the core pipeline (no provider credentials, no network).

Run with:  python smoke_test.py
"""
from __future__ import annotations
from docexplainer.analysis.orchestrator import AnalysisOrchestrator
from docexplainer.service import LegalDocService

SAMPLE = (
    "RENTAL AGREEMENT. The tenant shall pay a security deposit of Rs. 2,50,000. "
    "A lock-in period of 11 months applies. Either party may seek termination with notice."
)


def main():
    service = LegalDocService(AnalysisOrchestrator(adapters=[]))  # heuristic tier only
    out = service.analyze_upload("sample.txt", "text/plain", SAMPLE.encode("utf-8"))
    print("Type:", out["document"]["type"])
    print("Risks:", [r["title"] for r in out["analysis"]["risks"]])
    qa = service.ask_question(out["document"]["id"], "What is the lock-in period?")
    print("Answer:", qa["answer"])
    assert out["document"]["type"] == "Residential Rental Agreement", "Heuristic rental template not selected"
    assert "What is the lock-in period?" in qa["answer"], "Q&A fallback did not reference the question"
    print("Smoke test passed.")


if __name__ == "__main__":
    main()
