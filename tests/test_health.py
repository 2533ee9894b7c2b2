from docexplainer.utils.config import AppConfig
from docexplainer.utils.health import run_health_check


def test_health_check_basic():
    report = run_health_check()
    assert "components" in report
    assert isinstance(report["ok"], bool)


def test_health_reports_missing_credentials_without_failing():
    report = run_health_check(AppConfig(gemini_api_key=None, use_openai=False))
    by_name = {c["component"]: c for c in report["components"]}
    assert by_name["gemini-credentials"]["ok"]
    assert "missing" in by_name["gemini-credentials"]["detail"]
    assert by_name["openai-credentials"]["detail"] == "disabled"
    assert by_name["heuristic-tier"]["ok"]
