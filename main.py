#!/usr/bin/env python3
"""
Command-line entry point for worksheet statistics and data generation.
"""

# Usage overview:
# 1) describe: summarize the variable columns (B-F, rows 4-203) of a
#    worksheet CSV, one column of statistics per variable.
# 2) compare: correlation, regression and t statistics for two columns.
# 3) generate: fill a column with Normal, Uniform or Sequence values and
#    save the worksheet. Invalid parameters leave the file untouched.

import argparse
import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from datagen.errors import ValidationError
from datagen.generation import DistributionSpec, uniform_source
from datagen.reporting import bivariate_table, descriptives_table
from datagen.worksheet import FIRST_DATA_ROW, LAST_DATA_ROW, Worksheet
from datagen.data_processing import clean_sample


def build_parser():
    parser = argparse.ArgumentParser(
        description="Descriptive statistics and synthetic data for worksheet CSVs."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    describe_p = sub.add_parser("describe", help="Summarize variable columns B-F.")
    describe_p.add_argument("sheet", help="Worksheet CSV (no header row).")
    describe_p.add_argument("--decimals", type=int, default=4)

    compare_p = sub.add_parser("compare", help="Compare two columns.")
    compare_p.add_argument("sheet", help="Worksheet CSV (no header row).")
    compare_p.add_argument("x", help="Column letter of the first variable.")
    compare_p.add_argument("y", help="Column letter of the second variable.")
    compare_p.add_argument("--first-row", type=int, default=FIRST_DATA_ROW)
    compare_p.add_argument("--last-row", type=int, default=LAST_DATA_ROW)
    compare_p.add_argument("--decimals", type=int, default=4)

    gen_p = sub.add_parser("generate", help="Fill a column with generated values.")
    gen_p.add_argument("sheet", help="Worksheet CSV; created if missing.")
    gen_p.add_argument("--column", default="B")
    gen_p.add_argument(
        "--dist", dest="distType", choices=["normal", "uniform", "sequence"],
        default="normal",
    )
    gen_p.add_argument("--mean", default="50")
    gen_p.add_argument("--std-dev", dest="stdDev", default="10")
    gen_p.add_argument("--min", dest="minVal", default="0")
    gen_p.add_argument("--max", dest="maxVal", default="100")
    gen_p.add_argument("--start", dest="startVal", default="1")
    gen_p.add_argument("--increment", default="1")
    gen_p.add_argument("--count", dest="rowCount", default="20")
    gen_p.add_argument("--decimals", default="2")
    gen_p.add_argument("--start-row", type=int, default=FIRST_DATA_ROW)
    gen_p.add_argument("--seed", type=int, default=None)
    gen_p.add_argument("--output", default=None, help="Write here instead of in place.")
    return parser


def run_describe(args):
    sheet = Worksheet.from_csv(args.sheet)
    variables = sheet.read_variables()
    logging.info(
        "Read %d variables (%d values) from %s",
        len(variables),
        sum(len(v) for v in variables.values()),
        args.sheet,
    )
    print(descriptives_table(variables, decimals=args.decimals).to_string())
    return 0


def run_compare(args):
    sheet = Worksheet.from_csv(args.sheet)
    x = clean_sample(sheet.column_cells(args.x, args.first_row, args.last_row), name=args.x)
    y = clean_sample(sheet.column_cells(args.y, args.first_row, args.last_row), name=args.y)
    if not x or not y:
        logging.error("Both columns need at least one numeric value.")
        return 1
    if len(x) != len(y):
        logging.warning(
            "Columns differ in length (%d vs %d); pairing the first %d values",
            len(x),
            len(y),
            min(len(x), len(y)),
        )
    print(bivariate_table(x, y, decimals=args.decimals).to_string(index=False))
    return 0


def run_generate(args):
    form = {
        key: getattr(args, key)
        for key in (
            "distType", "mean", "stdDev", "minVal", "maxVal",
            "startVal", "increment", "rowCount", "decimals",
        )
    }
    try:
        spec = DistributionSpec.from_form(form)
    except ValidationError as exc:
        logging.error("Invalid generation parameters: %s", exc)
        return 2

    sheet = Worksheet.from_csv(args.sheet) if os.path.exists(args.sheet) else Worksheet()
    try:
        sheet.generate_into(
            args.column, spec, uniform_source(args.seed), start_row=args.start_row
        )
    except ValidationError as exc:
        logging.error("Generation failed: %s", exc)
        return 2
    output = args.output or args.sheet
    sheet.to_csv(output)
    logging.info("Saved worksheet to %s", output)
    return 0


def main(argv=None):
    """Parse arguments and dispatch to the chosen command."""
    args = build_parser().parse_args(argv)
    handlers = {
        "describe": run_describe,
        "compare": run_compare,
        "generate": run_generate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
