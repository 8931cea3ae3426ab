"""
Command-line interface for LoanLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from loanlab import __version__
from loanlab.core.comparison import LoanComparison, LoanScenario
from loanlab.core.engine import simulate


def _load_json(path: str) -> dict:
    """Load JSON from file path."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy scalars/arrays and pandas objects."""

    def default(self, obj):
        import numpy as np
        import pandas as pd

        if isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.generic):
            return obj.item()
        elif isinstance(obj, pd.DataFrame):
            return obj.to_dict("records")
        elif isinstance(obj, pd.Series):
            return obj.to_dict()
        return super().default(obj)


def _save_json(path: str, data: dict) -> None:
    """Save data as JSON to file path."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, cls=NumpyEncoder)


def _print_summary(label: str, summary: dict) -> None:
    """Print a scenario summary block to stdout."""
    print(f"{label}")
    print(f"  Starting payment : {summary['starting_payment']:,.2f}")
    print(f"  Total interest   : {summary['total_interest']:,.2f}")
    print(f"  Total paid       : {summary['total_paid']:,.2f}")
    print(f"  Payoff time      : {summary['payoff_note']}")
    if summary["outcome"] != "paid_off":
        print(
            f"  Not paid off, {summary['final_principal']:,.2f} outstanding "
            f"after {summary['months_to_payoff']} months"
        )


# Default scenarios of the comparator
EXAMPLE_COMPARISON = {
    "loans": [
        {
            "label": "Loan A",
            "principal": 7_500_000,
            "years": 25,
            "months_extra": 0,
            "annual_rate": 7.7,
            "step_up": {"mode": "none", "value": 0},
            "prepay": {
                "one_time_amount": 0,
                "one_time_month": 0,
                "recurring_annual_amount": 0,
            },
            "savings_offset": {
                "enabled": True,
                "start_savings": 500_000,
                "monthly_increment": 10_000,
                "transfer_every_years": 2,
                "transfer_amount": 200_000,
            },
        },
        {
            "label": "Loan B",
            "principal": 7_500_000,
            "years": 25,
            "months_extra": 0,
            "annual_rate": 7.5,
            "step_up": {"mode": "yearly_percent", "value": 5},
            "prepay": {
                "one_time_amount": 0,
                "one_time_month": 0,
                "recurring_annual_amount": 100_000,
            },
            "savings_offset": {"enabled": False},
        },
    ]
}


def cmd_example(_) -> int:
    """Print a working two-loan comparison JSON."""
    json.dump(EXAMPLE_COMPARISON, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_run(args) -> int:
    """Simulate a single loan JSON and optionally export the schedule."""
    try:
        scenario = LoanScenario.from_dict(_load_json(args.input))
        result = simulate(scenario.config)

        _print_summary(scenario.label, result.summary())

        if args.table:
            frame = result.to_frame()
            print()
            print(frame.head(args.table).to_string(float_format=lambda v: f"{v:,.2f}"))

        if args.output:
            _save_json(
                args.output,
                {
                    "label": scenario.label,
                    "config": scenario.config.to_dict(),
                    "summary": result.summary(),
                    "schedule": result.to_frame().reset_index(),
                    "events": [e._asdict() for e in result.events],
                },
            )
            print(f"Results saved to {args.output}")
        return 0

    except Exception as e:
        print(f"Error running loan: {e}", file=sys.stderr)
        return 1


def cmd_compare(args) -> int:
    """Compare two loans from a comparison JSON."""
    try:
        comparison = LoanComparison.from_dict(_load_json(args.input))
        result = comparison.run()

        summary = result.summary_frame()
        for label, row in summary.iterrows():
            _print_summary(str(label), row.to_dict())
            print(f"  Effective rate   : {row['effective_rate_approx']:.2f}% (approx)")
        print()
        for line in result.insights():
            print(f"• {line}")

        if args.output:
            payload = result.to_dict()
            payload["tidy"] = result.tidy()
            _save_json(args.output, payload)
            print(f"Results saved to {args.output}")

        if args.chart:
            from loanlab.charts import principal_over_time, save_chart

            fig, _ = principal_over_time(
                result.tidy(), [result.first.label, result.second.label]
            )
            save_chart(fig, args.chart, format="html")
            print(f"Chart saved to {args.chart}")
        return 0

    except Exception as e:
        print(f"Error comparing loans: {e}", file=sys.stderr)
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="loanlab", description="LoanLab - Loan amortization comparator"
    )

    parser.add_argument(
        "--version", action="version", version=f"LoanLab {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example", help="Print a two-loan comparison JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    # Run command
    run_parser = subparsers.add_parser(
        "run", help="Simulate one loan JSON and print its summary"
    )
    run_parser.add_argument("-i", "--input", required=True, help="Input loan JSON file")
    run_parser.add_argument("-o", "--output", help="Output results JSON file")
    run_parser.add_argument(
        "--table",
        type=int,
        default=0,
        help="Print the first N months of the schedule (default: 0)",
    )
    run_parser.set_defaults(func=cmd_run)

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare", help="Compare two loans from a comparison JSON"
    )
    compare_parser.add_argument(
        "-i", "--input", required=True, help="Input comparison JSON file"
    )
    compare_parser.add_argument("-o", "--output", help="Output results JSON file")
    compare_parser.add_argument(
        "--chart", help="Write the principal-over-time chart to this HTML file"
    )
    compare_parser.epilog = """
Effective rate:
  • total_interest / (principal / 2 × years), a rough heuristic and not an IRR
  • Use it to rank scenarios, not to quote a rate
    """
    compare_parser.set_defaults(func=cmd_compare)

    # Parse arguments and execute
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
