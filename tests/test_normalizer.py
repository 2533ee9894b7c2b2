from docexplainer.analysis.normalizer import (
    SUMMARY_MAX_CHARS,
    SUMMARY_TRUNCATE_THRESHOLD,
    classify_response,
    key_provisions_for,
    normalize_response,
)
from docexplainer.analysis.rules import FALLBACK_PROVISIONS


def test_summary_truncated_with_ellipsis():
    raw = "x" * (SUMMARY_TRUNCATE_THRESHOLD + 1)
    result = normalize_response(raw, "doc")
    assert result.summary == "x" * SUMMARY_MAX_CHARS + "..."


def test_summary_up_to_threshold_kept_whole():
    raw = "x" * SUMMARY_TRUNCATE_THRESHOLD
    assert normalize_response(raw, "doc").summary == raw
    raw = "y" * (SUMMARY_MAX_CHARS + 50)
    assert normalize_response(raw, "doc").summary == raw


def test_short_summary_kept_verbatim():
    result = normalize_response("  Short analysis.  ", "doc")
    assert result.summary == "Short analysis."


def test_blank_response_still_has_summary():
    assert normalize_response("   ", "doc").summary


def test_document_type_priority_order():
    # rental beats employment when both appear
    assert classify_response("A lease for the employment office") == "Rental Agreement"
    assert classify_response("This JOB offer letter") == "Employment Contract"
    assert classify_response("Deed of sale for the property") == "Property Document"
    assert classify_response("Mortgage terms") == "Financial Agreement"
    assert classify_response("Power of attorney") == "Legal Document"


def test_document_type_uses_response_not_document():
    result = normalize_response("A general contract.", "rental lease agreement")
    assert result.document_type == "Legal Document"


def test_deposit_keyword_adds_risk_and_term():
    base = normalize_response("analysis", "The parties agree to the terms below.")
    with_deposit = normalize_response("analysis", "The parties agree to the terms below. A deposit is payable.")
    base_titles = [r.title for r in base.risks]
    dep_titles = [r.title for r in with_deposit.risks]
    assert base_titles == ["Document Review Needed"]
    assert dep_titles == ["Document Review Needed", "Security Deposit Terms"]
    assert with_deposit.risks[1].severity == "high"
    assert "Security Deposit" in [t.term for t in with_deposit.legal_terms]
    assert "Security Deposit" not in [t.term for t in base.legal_terms]


def test_termination_term_added():
    result = normalize_response("analysis", "Either party may cancel with notice.")
    assert [t.term for t in result.legal_terms] == ["Legal Obligation", "Termination Clause"]


def test_key_provisions_in_check_order():
    text = "Termination rules. The fee is fixed. Obligation of the tenant. Duration of two years."
    assert key_provisions_for(text) == (
        "Payment terms and amounts",
        "Agreement duration and time periods",
        "Rights and responsibilities of parties",
        "Termination and cancellation terms",
    )


def test_key_provisions_fallback_when_nothing_matches():
    assert key_provisions_for("Signed by both.") == FALLBACK_PROVISIONS


def test_risk_ids_sequential():
    result = normalize_response("analysis", "security deposit")
    assert [r.id for r in result.risks] == ["risk_1", "risk_2"]
