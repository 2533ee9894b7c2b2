"""Analyze a legal document from the command line.

Usage:  python main.py [--export report.json] contract.pdf ["What is the lock-in period?" ...]
"""
from __future__ import annotations
import json
import mimetypes
import sys
from datetime import datetime, timezone
from pathlib import Path

from docexplainer.service import build_service, error_response
from docexplainer.utils.config import AppConfig
from docexplainer.utils.logger import set_level

mimetypes.add_type("application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx")


def main(argv):
    export_path = None
    if len(argv) >= 2 and argv[0] == "--export":
        export_path, argv = Path(argv[1]), argv[2:]
    if not argv:
        print(__doc__)
        return 2
    config = AppConfig.from_env()
    set_level(config.log_level)
    service = build_service(config)
    path = Path(argv[0])
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    try:
        analysis = service.analyze_upload(path.name, content_type, path.read_bytes())
        print(json.dumps(analysis, indent=2, ensure_ascii=False))
        document_id = analysis["document"]["id"]
        for question in argv[1:]:
            qa = service.ask_question(document_id, question)
            print(json.dumps(qa, indent=2, ensure_ascii=False))
        if export_path:
            meta = {"app": "legal-doc-explainer", "exported_at": datetime.now(timezone.utc).isoformat()}
            export_path.write_text(service.export_json(document_id, meta), encoding="utf-8")
            print(f"Report written to {export_path}")
    except Exception as e:
        status, body = error_response(e)
        print(f"[{status}] {body['message']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
