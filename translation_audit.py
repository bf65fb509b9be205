"""렌더링된 HTML 페이지의 번역 키 커버리지 검사

사용법:
  python translation_audit.py page.html
  python translation_audit.py http://localhost:8007/?lang=hy --min-coverage 100
  python translation_audit.py a.html b.html --output coverage_report.json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import List

import requests

from dom_utils import parse_html
from translation_scanner import ScanResult, scan_translation_coverage


@dataclass
class PageReport:
    source: str
    result: ScanResult

    def to_dict(self):
        data = self.result.to_dict()
        data['source'] = self.source
        return data


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check data-i18n-key coverage of rendered HTML pages.")
    p.add_argument("sources", nargs="+", help="HTML files or http(s) URLs")
    p.add_argument("--min-coverage", type=int, default=100,
                   help="Fail when any page is below this percentage (default: 100).")
    p.add_argument("--output", default="", help="Optional JSON report path.")
    p.add_argument("--timeout", type=float, default=15, help="HTTP timeout for URLs in seconds.")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def load_source(source, timeout=15) -> str:
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.text
    with open(source, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()


def audit_source(source, timeout=15) -> PageReport:
    document = parse_html(load_source(source, timeout=timeout))
    return PageReport(source=source, result=scan_translation_coverage(document=document))


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    reports: List[PageReport] = []
    errors = 0
    for source in args.sources:
        if not source.startswith(("http://", "https://")) and not os.path.exists(source):
            print(f"[ERR] File not found: {source}")
            errors += 1
            continue
        try:
            reports.append(audit_source(source, timeout=args.timeout))
        except (requests.RequestException, OSError) as exc:
            print(f"[ERR] {source}: {exc}")
            errors += 1

    failing = 0
    for report in reports:
        result = report.result
        status = "OK" if result.coverage_percentage >= args.min_coverage else "FAIL"
        if status == "FAIL":
            failing += 1
        print(f"[{status}] {report.source}: {result.coverage_percentage}% "
              f"({result.translated_nodes}/{result.total_text_nodes} text nodes)")
        for missing in result.missing_keys:
            print(f"  - \"{missing.text}\" <{missing.parent_tag}> {missing.xpath}")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            json.dump([report.to_dict() for report in reports], fh, ensure_ascii=False, indent=2)
        print(f"\nReport written: {args.output}")

    if errors or failing:
        print(f"\nPages below {args.min_coverage}%: {failing}, errors: {errors}")
        return 1
    print(f"\nOK: {len(reports)} page(s) checked.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
