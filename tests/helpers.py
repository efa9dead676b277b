"""
Test helper functions

Shared assertions for identifier sequences.
"""

from uuidv7_kit.codec.fields import from_canonical

# 2024-04-22 19:55:02.151 UTC, the timestamp of the reference identifier
REFERENCE_MS = 1713815702151
REFERENCE_ID = "018f0760-4a87-737d-9889-b832d3dcce74"


def assert_strictly_increasing(ids: list[str]) -> None:
    """Both string order and numeric order must increase at every step"""
    for previous, current in zip(ids, ids[1:]):
        assert previous < current, f"{previous} !< {current}"
        assert from_canonical(previous) < from_canonical(current)
