"""
Prometheus metrics collection for uuidv7-kit.

Provides observability into generation volume, clock waits and decoding.
"""

from prometheus_client import Counter, Histogram, start_http_server

# ============================================================================
# Generation Metrics
# ============================================================================

ids_generated_total = Counter(
    "uuidv7_ids_generated_total",
    "Total number of UUIDv7 identifiers generated",
    ["generator"],  # generator: monotonic, fixed_timestamp
)

clock_waits_total = Counter(
    "uuidv7_clock_waits_total",
    "Total number of times a generator had to wait for the clock",
    ["reason"],  # reason: clock_regression, counters_exhausted, not_increasing
)

counter_overflows_total = Counter(
    "uuidv7_counter_overflows_total",
    "Total number of counter overflows within a single millisecond",
    ["generator", "counter"],  # counter: rand_b, rand_a
)

batch_size = Histogram(
    "uuidv7_batch_size",
    "Number of identifiers requested per batch generation",
    buckets=(1, 10, 100, 1_000, 10_000, 100_000, 1_000_000),
)

# ============================================================================
# Transcoding Metrics
# ============================================================================

decode_failures_total = Counter(
    "uuidv7_decode_failures_total",
    "Total number of failed decodes",
    ["reason"],  # reason: unknown_character, invalid_identifier
)

# Pre-bound children for the per-identifier hot path
monotonic_generated = ids_generated_total.labels(generator="monotonic")
fixed_generated = ids_generated_total.labels(generator="fixed_timestamp")


def start_metrics_server(port: int = 9090) -> None:
    """
    Start Prometheus metrics HTTP server.

    Args:
        port: Port to expose metrics on (default: 9090)

    Example:
        start_metrics_server(9090)
        # Metrics available at http://localhost:9090/metrics
    """
    start_http_server(port)
