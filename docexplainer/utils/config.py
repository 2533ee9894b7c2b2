from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

MIB = 1024 * 1024


@dataclass(frozen=True)
class AppConfig:
    use_gemini: bool = True
    use_openai: bool = True
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    openai_model: str = "gpt-4o-mini"
    temperature: float = 0.1
    max_tokens: int = 1200
    qa_max_tokens: int = 500
    provider_timeout: float = 60.0
    provider_max_retries: int = 0
    retry_backoff: float = 1.0
    # excerpt budgets (characters) per provider prompt
    freetext_analysis_chars: int = 1200
    freetext_qa_chars: int = 1500
    qa_context_chars: int = 500
    json_analysis_chars: int = 12000
    json_qa_chars: int = 12000
    max_upload_bytes: int = 10 * MIB
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        load_dotenv()
        return cls(
            use_gemini=os.getenv("USE_GEMINI", "true").lower() == "true",
            use_openai=os.getenv("USE_OPENAI", "true").lower() == "true",
            gemini_api_key=os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY"),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            temperature=float(os.getenv("TEMPERATURE", "0.1")),
            max_tokens=int(os.getenv("MAX_TOKENS", "1200")),
            qa_max_tokens=int(os.getenv("QA_MAX_TOKENS", "500")),
            provider_timeout=float(os.getenv("PROVIDER_TIMEOUT", "60")),
            provider_max_retries=int(os.getenv("PROVIDER_MAX_RETRIES", "0")),
            retry_backoff=float(os.getenv("RETRY_BACKOFF", "1.0")),
            freetext_analysis_chars=int(os.getenv("FREETEXT_ANALYSIS_CHARS", "1200")),
            freetext_qa_chars=int(os.getenv("FREETEXT_QA_CHARS", "1500")),
            qa_context_chars=int(os.getenv("QA_CONTEXT_CHARS", "500")),
            json_analysis_chars=int(os.getenv("JSON_ANALYSIS_CHARS", "12000")),
            json_qa_chars=int(os.getenv("JSON_QA_CHARS", "12000")),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * MIB))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
