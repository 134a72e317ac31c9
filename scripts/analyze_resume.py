from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.ats.corpus import CorpusClient  # noqa: E402
from app.ats.engine import ATSEngine  # noqa: E402
from app.ats.text_provider import TextProvider  # noqa: E402
from app.schemas.resume import ResumeData  # noqa: E402


async def _run(resume: ResumeData, *, offline: bool) -> dict:
    engine = ATSEngine(
        corpus=CorpusClient(enabled=False) if offline else None,
        text_provider=TextProvider(use_remote=False) if offline else None,
    )
    suggestions, score = await engine.analyze(resume)
    return {
        "score": score.model_dump(),
        "suggestions": [suggestion.model_dump() for suggestion in suggestions],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Print ATS suggestions and score for a resume JSON file.")
    parser.add_argument("path", help="Resume JSON in the editor's camelCase shape")
    parser.add_argument("--offline", action="store_true", help="Skip the corpus and completion calls")
    parser.add_argument("--out", default="", help="Write the report here instead of stdout")
    args = parser.parse_args()

    raw = Path(args.path).read_text(encoding="utf-8")
    resume = ResumeData.model_validate_json(raw)
    report = asyncio.run(_run(resume, offline=args.offline))

    text = json.dumps(report, indent=2, ensure_ascii=False)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


if __name__ == "__main__":
    main()
