#!/usr/bin/env python3
"""Synthetic contact dataset generator for manual and performance testing.

Writes an exporter-shaped contact table (generic, eventbrite, luma or
partiful) as .csv or .xlsx. A configurable share of rows repeats an earlier
contact's email, phone or full name so that duplicate flagging has something
to find.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

FIRST_NAMES = ["Jane", "John", "Amara", "Kenji", "Lucia", "Omar", "Priya", "Sam", "Tomasz", "Yuki"]
LAST_NAMES = ["Doe", "Smith", "Okafor", "Tanaka", "Garcia", "Haddad", "Patel", "Lee", "Nowak", "Sato"]
COMPANIES = ["Acme", "Globex", "Initech", "Umbrella", "Hooli", "Stark Industries"]
TITLES = ["Engineer", "Designer", "Founder", "Product Manager", "Researcher"]
CITIES = ["Berlin", "Lagos", "Osaka", "Lisbon", "Toronto", "Austin"]

HEADERS = {
    "generic": ["Name", "Email", "Phone", "Company", "Job Title", "City", "Tags"],
    "eventbrite": [
        "Order #", "First Name", "Last Name", "Email", "Cell Phone", "Company",
        "Job Title", "Attendee Status", "Event Name", "Ticket Type",
    ],
    "luma": ["Guest ID", "Name", "Email", "Phone Number", "Company", "Title", "RSVP Status"],
    "partiful": ["Name", "Email", "Phone", "Status", "Plus Ones"],
}


def _person(rng: np.random.Generator, i: int) -> dict[str, str]:
    first = str(rng.choice(FIRST_NAMES))
    last = str(rng.choice(LAST_NAMES))
    return {
        "first": first,
        "last": last,
        "email": f"{first.lower()}.{last.lower()}{i}@example.com",
        "phone": f"555-{1000 + i % 9000:04d}",
        "company": str(rng.choice(COMPANIES)),
        "title": str(rng.choice(TITLES)),
        "city": str(rng.choice(CITIES)),
    }


def _row(fmt: str, p: dict[str, str], i: int) -> list[str]:
    full = f"{p['first']} {p['last']}"
    if fmt == "generic":
        return [full, p["email"], p["phone"], p["company"], p["title"], p["city"], "synthetic;perf"]
    if fmt == "eventbrite":
        return [
            str(100000 + i), p["first"], p["last"], p["email"], p["phone"], p["company"],
            p["title"], "Attending", "Synthetic Meetup", "General Admission",
        ]
    if fmt == "luma":
        return [f"gst-{i}", full, p["email"], p["phone"], p["company"], p["title"], "going"]
    return [full, p["email"], p["phone"], "Going", str(i % 3)]


def generate_contacts(fmt: str, rows: int, duplicate_rate: float = 0.1, seed: int = 42) -> pd.DataFrame:
    """Build a DataFrame of synthetic contacts in the given exporter layout.

    Args:
        fmt: generic | eventbrite | luma | partiful
        rows: Number of data rows
        duplicate_rate: Share of rows that reuse an earlier person (0.0 - 1.0)
        seed: Random seed for reproducible data
    """
    rng = np.random.default_rng(seed)
    people: list[dict[str, str]] = []
    data: list[list[str]] = []
    for i in range(rows):
        if people and rng.random() < duplicate_rate:
            person = dict(people[int(rng.integers(len(people)))])
            # 重複の種類をばらす: email / phone / 氏名のみ一致
            mode = int(rng.integers(3))
            if mode == 1:
                person["email"] = f"alt{i}@example.org"
            elif mode == 2:
                person["email"] = f"alt{i}@example.org"
                person["phone"] = f"556-{i % 10000:04d}"
        else:
            person = _person(rng, i)
            people.append(person)
        data.append(_row(fmt, person, i))
    return pd.DataFrame(data, columns=HEADERS[fmt])


def write_dataset(df: pd.DataFrame, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".xlsx":
        df.to_excel(output_path, index=False, engine="openpyxl")
    else:
        # 値にカンマを含めないため単純な結合で十分
        lines = [",".join(df.columns)]
        lines.extend(",".join(str(v) for v in record) for record in df.itertuples(index=False))
        output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Created contact file: {output_path}")
    print(f"  Rows: {len(df):,}")
    print(f"  Columns: {len(df.columns)}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic contact exports for testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10k generic rows as CSV
  %(prog)s data/contacts.csv --rows 10000

  # Eventbrite layout as a workbook, 25% duplicates
  %(prog)s data/eventbrite.xlsx --format eventbrite --duplicate-rate 0.25
        """,
    )
    parser.add_argument("output", type=Path, help="Output file (.csv, .txt or .xlsx)")
    parser.add_argument("--format", choices=sorted(HEADERS), default="generic", help="Exporter layout (default: generic)")
    parser.add_argument("--rows", type=int, default=10_000, help="Number of data rows (default: 10,000)")
    parser.add_argument("--duplicate-rate", type=float, default=0.1, help="Share of repeated contacts (default: 0.1)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0.0 <= args.duplicate_rate <= 1.0:
        print("Error: --duplicate-rate must be between 0 and 1", file=sys.stderr)
        return 1
    if args.output.suffix.lower() not in (".csv", ".txt", ".xlsx"):
        print("Error: output must end with .csv, .txt or .xlsx", file=sys.stderr)
        return 1

    df = generate_contacts(args.format, args.rows, args.duplicate_rate, args.seed)
    try:
        write_dataset(df, args.output)
    except OSError as e:
        print(f"Error writing dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
