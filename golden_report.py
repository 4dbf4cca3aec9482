"""Golden report of tokenized, normalized lesson sentences.

Intended usage when changing the tokenizer or normalizer:
1. python golden_report.py URL --output /tmp/report_old.json
2. make the change
3. python golden_report.py URL --output /tmp/report_new.json
4. diff the two files
"""
import argparse
import json
import sys
from typing import Any, Dict, List

from dictation.alignment import get_words, normalize
from dictation.lesson_data import LessonDataError, extract_sentences_from_section, load_lesson_document


def build_report(document: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Normalized words of every sentence, grouped by section."""
    return [
        {
            "id": section.get("id"),
            "sentences": [
                [normalize(w) for w in get_words(sentence)]
                for sentence in extract_sentences_from_section(section)
            ],
        }
        for section in document["sections"]
    ]


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Print normalized sentences of a lesson document as JSON.")
    p.add_argument("source", help="URL or path of the lesson JSON document")
    p.add_argument("--output", "-o", help="write the report to this file instead of stdout")
    p.add_argument("--indent", type=int, default=2)
    args = p.parse_args(argv)

    try:
        document = load_lesson_document(args.source)
    except LessonDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = json.dumps(build_report(document), indent=args.indent, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Report written to {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
