"""Keyword rule tables used to turn free-text model output into structured results.

Each rule pairs a keyword set with exactly one contribution. Rules are
independent; a rule fires when any of its keywords occurs (case-insensitive
substring) in the text it is checked against. Table order is output order.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

# Checked against the model response; first match wins.
DOCUMENT_TYPE_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("rental", "lease"), "Rental Agreement"),
    (("employment", "job"), "Employment Contract"),
    (("property", "sale"), "Property Document"),
    (("loan", "mortgage"), "Financial Agreement"),
]
DEFAULT_DOCUMENT_TYPE = "Legal Document"

BASE_RISK: Dict[str, str] = {
    "severity": "medium",
    "title": "Document Review Needed",
    "description": (
        "This document contains legal terms and clauses that should be carefully reviewed. "
        "Some parts may favor one party over another or have terms that are not clearly explained."
    ),
    "section": "General Terms",
    "recommendation": (
        "Have a lawyer review this document before signing. Pay special attention to payment terms, "
        "penalties, and termination clauses. Make sure you understand all your rights and obligations."
    ),
}

# Checked against the original document text.
RISK_RULES: List[Tuple[Tuple[str, ...], Dict[str, str]]] = [
    (
        ("deposit", "security"),
        {
            "severity": "high",
            "title": "Security Deposit Terms",
            "description": (
                "This document mentions security deposits or advance payments. "
                "Make sure the amount is fair and refund terms are clearly stated."
            ),
            "section": "Payment Terms",
            "recommendation": (
                "Check that deposit amounts are reasonable for your area. Ensure the document clearly explains "
                "when and how you will get your money back. Ask for a receipt for any money paid."
            ),
        },
    ),
]

BASE_TERM: Dict[str, str] = {
    "term": "Legal Obligation",
    "definition": (
        "Something you must do according to the law or this document. "
        "If you don't do it, there could be legal consequences or penalties."
    ),
    "context": (
        "In Indian law, when you sign a document, you agree to follow its terms. "
        "Courts can enforce these obligations if there are disputes."
    ),
}

TERM_RULES: List[Tuple[Tuple[str, ...], Dict[str, str]]] = [
    (
        ("deposit", "security"),
        {
            "term": "Security Deposit",
            "definition": (
                "Money you pay upfront as protection against damages or unpaid amounts. "
                "It should be returned when the agreement ends if terms are met."
            ),
            "context": (
                "In India, security deposits should be reasonable. "
                "Make sure the document clearly states when and how you will get this money back."
            ),
        },
    ),
    (
        ("termination", "cancel"),
        {
            "term": "Termination Clause",
            "definition": (
                "Rules about how and when this agreement can be ended by either party. "
                "This includes notice periods and any penalties for early termination."
            ),
            "context": (
                "Indian law protects against unfair termination terms. "
                "Make sure termination rules are reasonable and don't heavily favor one side."
            ),
        },
    ),
]

PROVISION_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("amount", "price", "fee"), "Payment terms and amounts"),
    (("duration", "period", "term"), "Agreement duration and time periods"),
    (("responsibility", "obligation"), "Rights and responsibilities of parties"),
    (("termination", "end", "cancel"), "Termination and cancellation terms"),
]
FALLBACK_PROVISIONS: Tuple[str, ...] = ("Main terms and conditions", "Party obligations", "Important clauses")


def matches(keywords: Tuple[str, ...], lowered_text: str) -> bool:
    return any(k in lowered_text for k in keywords)
