#!/usr/bin/env python3
"""
Basic usage - generate, encode, inspect

Scenario:
- Generate a batch of identifiers and show they sort by creation
- Shorten one with Base58 and with a custom alphabet, then restore it
- Backfill identifiers for a historical timestamp
- Read the timestamp back out of an identifier

Run:
    python examples/basic_usage.py
"""

from datetime import datetime, timezone

from uuidv7_kit import FixedTimestampGenerator, UUIDv7, timestamp_of


def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'='*70}")
    print(f"  {title}")
    print(f"{'='*70}\n")


def main() -> None:
    ids = UUIDv7()

    print_section("Monotonic generation")
    batch = ids.gen_many(5)
    for identifier in batch:
        print(f"  {identifier}")
    print(f"\n  Sorted already: {batch == sorted(batch)}")

    print_section("Compact encoding")
    identifier = batch[0]
    encoded = ids.encode(identifier)
    print(f"  Canonical: {identifier}")
    print(f"  Base58:    {encoded}")
    print(f"  Decoded:   {ids.decode(encoded)}")

    crockford = UUIDv7("0123456789ABCDEFGHJKMNPQRSTVWXYZ")
    print(f"  Base32:    {crockford.encode(identifier)}")
    print(f"  Typo:      {ids.decode(encoded[:-1] + '0')}  (None - '0' is not Base58)")

    print_section("Backfilling history")
    # UUIDv7 timestamps start at the Unix epoch, so nothing earlier than 1970
    millennium = datetime(2000, 1, 1, tzinfo=timezone.utc)
    millennium_ms = int(millennium.timestamp() * 1000)
    backfill = FixedTimestampGenerator()
    for _ in range(3):
        print(f"  {backfill.generate(millennium_ms)}")

    print_section("Inspection")
    print(f"  Valid:     {UUIDv7.is_valid(identifier)}")
    print(f"  Timestamp: {timestamp_of(identifier)}")
    print(f"  Date:      {UUIDv7.date(identifier)}")
    print(f"  v4 valid:  {UUIDv7.is_valid('c8cb31ca-8fb7-476d-806a-e2181dcdf980')}")


if __name__ == "__main__":
    main()
