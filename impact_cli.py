# impact_cli.py
import argparse
import json
import logging
import sys

from babel import Locale, UnknownLocaleError

import config
from currency_format import SUPPORTED_CURRENCIES
from impact_findings import build_impact_summary
from lighthouse import parse_lighthouse
from pdf_export import export_impact_pdf
from revenue_impact import VERTICAL_BENCHMARKS, calculate_business_impact
from ui import console

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CALCULATION_ERROR = 2


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )


def locale_arg(value: str) -> str:
    try:
        Locale.parse(value)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise argparse.ArgumentTypeError(f"unknown locale: {value!r}") from e
    return value


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Estimate monthly revenue lost to slow performance and accessibility gaps."
    )
    p.add_argument("--report", required=True, help="Lighthouse JSON report file ('-' for stdin)")
    # Business inputs are kept as raw strings: "1,800,000" is accepted
    p.add_argument("--sessions", required=True, help="Monthly shop visits (e.g. 100000)")
    p.add_argument("--avg-order", required=True, help="Average order value (e.g. 45)")
    p.add_argument("--conversion-rate", required=True, help="Conversion rate in percent (e.g. 2.5)")
    p.add_argument("--currency", choices=SUPPORTED_CURRENCIES, default=config.DEFAULT_CURRENCY,
                   help="Currency for displayed amounts")
    p.add_argument("--locale", type=locale_arg, default=config.DEFAULT_LOCALE, help="Number format locale (e.g. en_US, de_DE)")
    p.add_argument("--vertical", choices=sorted(VERTICAL_BENCHMARKS), default=None,
                   help="Benchmark vertical for the speed model (default: config)")
    p.add_argument("--json", action="store_true", help="Print the full summary as JSON")
    p.add_argument("--pdf", default=None, help="Optional: write a one-page PDF summary to this path")
    return p.parse_args(argv)


def read_report(path: str) -> bytes:
    # Raw bytes: decoding problems surface as an unreadable report, not a crash
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def print_summary(summary: dict) -> None:
    console.title(summary.get("headline") or "No Core Web Vitals in report")
    lines = [f"{f['title']}: {f['amount_display']}" for f in summary["findings"]]
    lines.append(f"Total estimated monthly loss: {summary['total_loss_display']}")
    console.print_panel("Estimated monthly impact", lines)
    console.warning("Statistical estimates only, not guaranteed results.")


def main(argv=None) -> int:
    setup_logging()
    args = parse_args(argv)
    vertical = args.vertical or config.DEFAULT_VERTICAL

    try:
        raw = read_report(args.report)
    except OSError as e:
        logger.error(f"Could not read report {args.report}: {e}")
        return EXIT_IO_ERROR

    metrics = parse_lighthouse(raw)
    if metrics.is_empty():
        logger.warning(f"No metrics found in report: {args.report}")

    outcome = calculate_business_impact(
        metrics,
        args.sessions,
        args.avg_order,
        args.conversion_rate,
        vertical=vertical,
    )
    if not outcome.ok:
        logger.debug(f"Calculation rejected: {outcome.reason}")
        if args.json:
            print(json.dumps(outcome.to_dict(), indent=2))
        else:
            console.error(outcome.message)
        return EXIT_CALCULATION_ERROR

    summary = build_impact_summary(outcome, metrics, args.currency, args.locale)

    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    else:
        print_summary(summary)

    if args.pdf:
        try:
            pdf_path = export_impact_pdf(summary, args.pdf)
        except OSError as e:
            logger.error(f"PDF export failed for {args.pdf}: {e}")
            return EXIT_IO_ERROR
        logger.info(f"Saved PDF: {pdf_path}")
        if not args.json:
            console.success(f"Saved PDF: {pdf_path}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
