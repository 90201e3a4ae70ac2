#!/usr/bin/env python3
"""Render a resume JSON file (a local backup or a saved document) to printable HTML."""

import argparse
import json
import sys

from resume_builder.client.preview import render_resume_html
from resume_builder.schemas.resume import ResumeDocument


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", help="Path to a resume JSON file")
    parser.add_argument("-o", "--output", help="Output HTML path (default: stdout)")
    args = parser.parse_args()

    with open(args.source, encoding="utf-8") as f:
        data = json.load(f)

    # Saved documents arrive wrapped in the API envelope
    if "data" in data and isinstance(data["data"], dict):
        data = data["data"]

    html = render_resume_html(ResumeDocument.model_validate(data))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(html)
        print(f"Output saved: {args.output}")
    else:
        sys.stdout.write(html)


if __name__ == "__main__":
    main()
