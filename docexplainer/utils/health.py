"""Lightweight health check utilities for the legal document explainer.

No provider calls are made: the goal is a fast readiness signal for CI / demo
scripts. Credentials are only checked for presence.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from docexplainer.utils.config import AppConfig


@dataclass
class HealthStatus:
    component: str
    ok: bool
    detail: str

    def as_dict(self) -> Dict[str, Any]:
        return {"component": self.component, "ok": self.ok, "detail": self.detail}


def _check_import(module: str) -> HealthStatus:
    try:
        __import__(module)
        return HealthStatus(module, True, "import ok")
    except Exception as e:  # pragma: no cover - diagnostic path
        return HealthStatus(module, False, f"import failed: {e}")


CORE_IMPORTS = [
    "google.generativeai",
    "openai",
    "pypdf",
    "docx",
    "dotenv",
]


def _check_credentials(config: AppConfig) -> List[HealthStatus]:
    # A missing key only degrades quality (heuristic tier), so these stay ok=True.
    out = []
    for name, enabled, key in (
        ("gemini-credentials", config.use_gemini, config.gemini_api_key),
        ("openai-credentials", config.use_openai, config.openai_api_key),
    ):
        if not enabled:
            detail = "disabled"
        else:
            detail = "key present" if key else "key missing; provider will be skipped"
        out.append(HealthStatus(name, True, detail))
    return out


def run_health_check(config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """Run import checks, a credential report and a heuristic-tier sanity run."""
    config = config or AppConfig()
    results: List[HealthStatus] = []
    for mod in CORE_IMPORTS:
        results.append(_check_import(mod))
    results.extend(_check_credentials(config))

    heuristic_ok = False
    heuristic_detail = ""
    try:
        from docexplainer.analysis.heuristic import HeuristicAnalyzer

        result = HeuristicAnalyzer().analyze("Sample rental agreement with a security deposit.", "sample.txt")
        heuristic_ok = bool(result.summary) and bool(result.key_provisions)
        heuristic_detail = f"heuristic tier ok ({result.document_type})"
    except Exception as e:  # pragma: no cover - rare path
        heuristic_detail = f"heuristic tier failed: {e}"
    results.append(HealthStatus("heuristic-tier", heuristic_ok, heuristic_detail))

    aggregate = all(r.ok for r in results)
    return {
        "ok": aggregate,
        "components": [r.as_dict() for r in results],
    }


if __name__ == "__main__":  # Manual invocation helper
    import json, sys
    report = run_health_check(AppConfig.from_env())
    print(json.dumps(report, indent=2))
    sys.exit(0 if report["ok"] else 1)
