from __future__ import annotations
from typing import Optional
import google.generativeai as genai
from docexplainer.analysis.normalizer import normalize_response
from docexplainer.llm.base import ProviderAdapter, excerpt, load_prompt
from docexplainer.utils.config import AppConfig
from docexplainer.utils.exceptions import ProviderError
from docexplainer.utils.logger import logger
from docexplainer.utils.types import AnalysisResult

ANALYSIS_TEMPLATE = load_prompt("analysis_freetext.txt")
QA_TEMPLATE = load_prompt("qa_freetext.txt")


class GeminiAdapter(ProviderAdapter):
    """Free-text chat provider. Responses are not parsed here; the normalizer shapes them."""
    name = "gemini"

    def __init__(self, config: AppConfig, model=None):
        self.config = config
        if model is None:
            if not config.gemini_api_key:
                raise ValueError("GOOGLE_API_KEY not set")
            genai.configure(api_key=config.gemini_api_key)
            model = genai.GenerativeModel(config.gemini_model)
        self.model = model

    def generate(self, prompt: str, max_tokens: int) -> str:
        try:
            rsp = self.model.generate_content(
                prompt,
                generation_config={"temperature": self.config.temperature, "max_output_tokens": max_tokens},
                request_options={"timeout": self.config.provider_timeout},
            )
            text = rsp.text
        except Exception as e:  # transport, quota, auth, blocked response
            raise ProviderError(self.name, f"generation failed: {e}") from e
        if not text or not text.strip():
            raise ProviderError(self.name, "empty response")
        return text

    def analyze(self, document_text: str, filename: str) -> AnalysisResult:
        prompt = ANALYSIS_TEMPLATE.format(
            filename=filename,
            excerpt=excerpt(document_text, self.config.freetext_analysis_chars),
        )
        logger.debug("gemini analysis prompt: %d chars", len(prompt))
        raw = self.generate(prompt, self.config.max_tokens)
        return normalize_response(raw, document_text, source=self.name)

    def answer(self, document_text: str, question: str, context: Optional[str] = None) -> str:
        earlier = ""
        if context:
            earlier = f"What we found earlier: {excerpt(context, self.config.qa_context_chars)}...\n"
        prompt = QA_TEMPLATE.format(
            excerpt=excerpt(document_text, self.config.freetext_qa_chars),
            context=earlier,
            question=question,
        )
        return self.generate(prompt, self.config.qa_max_tokens).strip()
