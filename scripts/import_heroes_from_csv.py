#!/usr/bin/env python3
"""
Import superheroes from a CSV export into the JSON dataset.

This script reads a CSV with one hero per row and writes the
data/superheroes.json file served by the API and the MCP server.

Usage:
    python scripts/import_heroes_from_csv.py resources/superheroes.csv

Expected columns:
    id, name, image, intelligence, strength, speed, durability, power, combat

The script will:
1. Read the CSV file
2. Skip rows without a name
3. Report rows with missing or non-numeric powerstats as errors
4. Validate each hero and report duplicate ids as errors
5. Write the remaining heroes, in CSV order, to data/superheroes.json
"""

import argparse
import csv
import json
from pathlib import Path

from pydantic import ValidationError

from superheroes.models import Hero

STAT_COLUMNS = ("intelligence", "strength", "speed", "durability", "power", "combat")


def parse_id(value: str) -> int | str:
    """Keep numeric ids as integers, anything else as a trimmed string."""
    value = value.strip()
    try:
        return int(value)
    except ValueError:
        return value


def parse_stat(row: dict, column: str) -> int:
    """Parse a single powerstat, raising ValueError if missing or invalid."""
    raw = (row.get(column) or "").strip()
    if not raw:
        raise ValueError(f"missing {column}")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{column} is not a number: {raw!r}")


def row_to_hero(row: dict, index: int) -> dict:
    """Convert one CSV row into a hero record."""
    raw_id = (row.get("id") or "").strip()
    hero_id = parse_id(raw_id) if raw_id else index
    return {
        "id": hero_id,
        "name": row["name"].strip(),
        "image": (row.get("image") or "").strip(),
        "powerstats": {column: parse_stat(row, column) for column in STAT_COLUMNS},
    }


def convert_rows(rows: list[dict]) -> tuple[list[dict], list[str]]:
    """
    Convert CSV rows into hero records.

    Rows are numbered from 1; a row with an empty id gets its row number.

    Returns:
        Tuple of (heroes, error messages).
    """
    heroes = []
    errors = []
    seen_ids = {}

    for index, row in enumerate(rows, start=1):
        name = (row.get("name") or "").strip()
        if not name:
            continue

        try:
            record = row_to_hero(row, index)
            hero = Hero.model_validate(record)
        except ValidationError as e:
            errors.append(f"row {index} ({name}): {e.error_count()} validation error(s)")
            continue
        except ValueError as e:
            errors.append(f"row {index} ({name}): {e}")
            continue

        if hero.id_key in seen_ids:
            errors.append(
                f"row {index} ({name}): duplicate id {hero.id!r} (first used on row {seen_ids[hero.id_key]})"
            )
            continue

        seen_ids[hero.id_key] = index
        heroes.append(record)

    return heroes, errors


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import superheroes from CSV to JSON")
    parser.add_argument("csv_path", type=Path, help="CSV file to import")
    parser.add_argument("--output", type=Path, default=None,
                        help="Output JSON file (default: data/superheroes.json)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print what would be done without writing files")
    parser.add_argument("--limit", type=int, default=None,
                        help="Limit number of heroes to process")
    args = parser.parse_args(argv)

    # Paths
    project_root = Path(__file__).parent.parent
    output_path = args.output or project_root / "data" / "superheroes.json"

    if not args.csv_path.exists():
        print(f"ERROR: CSV file not found: {args.csv_path}")
        return 1

    # Read CSV
    with open(args.csv_path, "r", encoding="utf-8-sig") as f:
        rows = list(csv.DictReader(f))

    print(f"Found {len(rows)} rows in CSV")

    if args.limit:
        rows = rows[:args.limit]
        print(f"Processing first {args.limit} rows")

    heroes, errors = convert_rows(rows)
    for error in errors:
        print(f"  ERROR: {error}")

    if args.dry_run:
        print(f"WOULD WRITE: {len(heroes)} heroes to {output_path}")
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(heroes, f, indent=2)
            f.write("\n")
        print(f"WROTE: {len(heroes)} heroes to {output_path}")

    print(f"\nSummary:")
    print(f"  Imported: {len(heroes)}")
    print(f"  Errors: {len(errors)}")

    return 1 if errors else 0


if __name__ == "__main__":
    exit(main())
