from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from galileo.modules.education.errors import EducationError
from galileo.modules.education.service import EducationService


def _load_text(inline: Optional[str], path: Optional[str], name: str) -> str:
    if inline and path:
        raise SystemExit(f"Provide either --{name} or --{name}-file, not both")
    if path:
        return Path(path).read_text(encoding="utf-8")
    if inline:
        return inline
    raise SystemExit(f"--{name} or --{name}-file is required")


async def _run(svc: EducationService, args: argparse.Namespace):
    if args.cmd == "explain":
        return await svc.explain_concept(args.topic)
    if args.cmd == "quiz":
        return await svc.generate_quiz(args.topic, question_count=args.count)
    if args.cmd == "flashcards":
        content = _load_text(args.content, args.content_file, "content")
        return await svc.create_flashcards(content, card_count=args.count)
    text = _load_text(args.text, args.text_file, "text")
    return await svc.summarize_notes(text)


def main(
    argv: list[str] | None = None, *, service: Optional[EducationService] = None
) -> int:
    parser = argparse.ArgumentParser(
        prog="galileo", description="Study material generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    e = sub.add_parser("explain", help="Explain a concept in simple terms")
    e.add_argument("--topic", "-t", required=True, help="Concept to explain")

    q = sub.add_parser("quiz", help="Generate a multiple-choice quiz")
    q.add_argument("--topic", "-t", required=True, help="Quiz topic")
    q.add_argument("--count", "-n", type=int, default=5, help="Number of questions")

    f = sub.add_parser("flashcards", help="Create flashcards from study content")
    f.add_argument("--content", "-c", help="Study content (text)")
    f.add_argument("--content-file", help="Path to a file containing the content")
    f.add_argument("--count", "-n", type=int, default=10, help="Number of cards")

    s = sub.add_parser("summarize", help="Summarize notes into key points")
    s.add_argument("--text", help="Notes to summarize (text)")
    s.add_argument("--text-file", help="Path to a file containing the notes")

    args = parser.parse_args(argv)
    svc = service or EducationService()
    try:
        result = asyncio.run(_run(svc, args))
    except EducationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
