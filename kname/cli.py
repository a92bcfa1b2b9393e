#!/usr/bin/env python3
"""
Command line interface for generating and searching Khmer names.

    kname generate --count 5 --gender female --popular
    kname search --meaning star --limit 3
    kname similar Sôvǎn
    kname stats
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.exceptions import KnameError
from .core.generator import Generator, GeneratorConfig
from .core.schema import FilterCriteria, Gender, NameRecord
from .data.loader import load_records, load_records_or_fallback


def _criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        gender=getattr(args, 'gender', None),
        origin=getattr(args, 'origin', None),
        category=getattr(args, 'category', None),
        popular_only=getattr(args, 'popular', False),
        meaning_contains=getattr(args, 'meaning', None),
        starts_with=getattr(args, 'prefix', None),
    )


def _format_record(record: NameRecord) -> str:
    line = f"{record.romanized_name:<24} {record.full_name:<20} {record.gender.value:<7}"
    if record.meaning:
        line += f" {record.meaning}"
    return line


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return number


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--gender', choices=[g.value for g in Gender], help="Gender to match (unisex names always match)")
    parser.add_argument('--origin', help="Exact origin, e.g. Pali")
    parser.add_argument('--category', help="Exact category, e.g. modern")
    parser.add_argument('--popular', action='store_true', help="Only popular names")
    parser.add_argument('--meaning', help="Case-insensitive substring of the meaning")
    parser.add_argument('--prefix', help="Romanized name prefix (surname first)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kname',
        description="Generate, search and compare Khmer names"
    )
    parser.add_argument('--data', '-d', help="Name dataset JSON (defaults to the bundled names)")
    parser.add_argument('--fallback', action='store_true', help="Use built-in names if the dataset fails to load")
    parser.add_argument('--seed', type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument('--verbose', '-v', action='store_true', help="Enable debug logging")

    subparsers = parser.add_subparsers(dest='command', required=True)

    generate = subparsers.add_parser('generate', help="Generate random names")
    generate.add_argument('--count', '-n', type=_non_negative_int, default=1, help="Number of names")
    generate.add_argument('--allow-duplicates', action='store_true', help="Sample with replacement")
    _add_filter_arguments(generate)

    search = subparsers.add_parser('search', help="List names matching filters")
    search.add_argument('--limit', type=_non_negative_int, default=0, help="Maximum results (0 for all)")
    _add_filter_arguments(search)

    similar = subparsers.add_parser('similar', help="Find names close to a romanized spelling")
    similar.add_argument('name', help="Romanized name to match")
    similar.add_argument('--threshold', type=_non_negative_int, default=2, help="Maximum edit distance")

    subparsers.add_parser('stats', help="Show dataset statistics")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        store = load_records_or_fallback(args.data) if args.fallback else load_records(args.data)
        generator = Generator(store, GeneratorConfig(seed=args.seed))

        if args.command == 'generate':
            criteria = _criteria_from_args(args)
            if args.count == 1:
                records = [generator.generate_one(criteria)]
            else:
                records = generator.generate_many(args.count, criteria, unique=not args.allow_duplicates)
            for record in records:
                print(_format_record(record))

        elif args.command == 'search':
            for record in generator.search(_criteria_from_args(args), limit=args.limit):
                print(_format_record(record))

        elif args.command == 'similar':
            for record in generator.find_similar(args.name, threshold=args.threshold):
                print(_format_record(record))

        elif args.command == 'stats':
            stats = generator.statistics()
            print(f"Total names: {stats.total}")
            for gender, count in stats.by_gender.items():
                print(f"   {gender:<8} {count}")
            print(f"Popular names: {stats.popular_count}")
            for category, count in sorted(stats.by_category.items()):
                print(f"   {category:<12} {count}")

    except KnameError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
