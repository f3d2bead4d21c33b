#!/usr/bin/env python3
"""
Entry point for code_score module.

Usage:
    python -m code_score PATH [--report] [--output FILE] [--json] [--verbose]
    python -m code_score PATH --remote http://localhost:8000
"""

import argparse
import json
import sys
from pathlib import Path

from .analyzer import CodeAnalyzer
from .client import analyze_remote
from .config import load_settings
from .exceptions import CodeScoreError, InputRejectedError
from .report import CATEGORY_LABELS, format_file_size, generate_markdown_report, print_summary
from .schema import validate_result


def print_remote_summary(data: dict) -> None:
    """Print summary of a result returned by the HTTP service."""
    print(f"\n{data['file_name']}: {data['overall_score']}/100 "
          f"({format_file_size(data['file_size'])})\n")
    for category, value in data['breakdown'].items():
        print(f"  {CATEGORY_LABELS.get(category, category):<15} {value}")
    print("\n📋 Recommendations:")
    for rec in data['recommendations']:
        print(f"  - {rec}")


def main():
    parser = argparse.ArgumentParser(description='Code Score')
    parser.add_argument('path', type=str, help='JavaScript or Python file to analyze')
    parser.add_argument('--report', action='store_true', help='Generate markdown report')
    parser.add_argument('--output', type=str, help='Output file for report')
    parser.add_argument('--json', action='store_true', help='Print result as JSON')
    parser.add_argument('--remote', type=str, help='Analyze via a code-score service at URL')
    parser.add_argument('--config', type=str, help='YAML settings file')
    parser.add_argument('--min-score', type=int, default=0, help='Fail below this score')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    args = parser.parse_args()

    path = Path(args.path).resolve()

    if not path.exists():
        print(f"❌ Path not found: {path}")
        sys.exit(1)

    try:
        settings = load_settings(args.config)

        if args.remote:
            data = analyze_remote(path, args.remote, timeout=settings.remote_timeout)
            if args.json:
                print(json.dumps(data, indent=2))
            else:
                print_remote_summary(data)
            sys.exit(0 if data['overall_score'] >= args.min_score else 1)

        if not args.json:
            print(f"🔍 Analyzing {path.name}...")
        analyzer = CodeAnalyzer(settings, verbose=args.verbose)
        result = analyzer.analyze_file(path)
        if args.json:
            payload = validate_result(result).model_dump_json(indent=2)
    except InputRejectedError as e:
        print(f"❌ {e}")
        sys.exit(1)
    except CodeScoreError as e:
        print(f"❌ {e}")
        sys.exit(2)

    if args.json:
        print(payload)
    elif args.report:
        report = generate_markdown_report(result)
        if args.output:
            Path(args.output).write_text(report, encoding='utf-8')
            print(f"\n📄 Report written to: {args.output}")
        else:
            print("\n" + report)
    else:
        print_summary(result)

    sys.exit(0 if result.overall_score >= args.min_score else 1)


if __name__ == '__main__':
    main()
