"""Error taxonomy shared by extraction, storage lookups and the provider tier.

Each error carries the user-facing ``message`` and the HTTP status a web layer
should answer with. ``ProviderError`` never reaches users: the orchestrator
absorbs it and moves to the next tier.
"""
from __future__ import annotations


class LegalDocError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(LegalDocError):
    status_code = 400


class UnsupportedDocumentError(InputValidationError):
    status_code = 415


class DocumentTooLargeError(InputValidationError):
    status_code = 413


class ExtractionError(LegalDocError):
    status_code = 422


class NotFoundError(LegalDocError):
    status_code = 404


class ProviderError(LegalDocError):
    status_code = 502

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
