# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics for the waitlist service."""
from prometheus_client import Counter, Histogram

WAITLIST_SIGNUPS = Counter(
    "waitlist_signups_total", "Total waitlist signups accepted"
)
WAITLIST_DUPLICATES = Counter(
    "waitlist_duplicate_signups_total", "Waitlist signups rejected as duplicates"
)
THOUGHTS_SUBMITTED = Counter(
    "thoughts_submitted_total", "Total thoughts accepted"
)
VALIDATION_FAILURES = Counter(
    "validation_failures_total", "Submissions rejected by validation", ["collection"]
)
ADMIN_AUTH_FAILURES = Counter(
    "admin_auth_failures_total", "Admin requests rejected for a bad or missing key"
)
EXPORTS = Counter(
    "exports_total", "CSV exports served", ["collection"]
)
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
