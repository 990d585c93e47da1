"""Test fixtures."""

from .sample_payloads import API_URL, SHOPKEY, SamplePayloads, make_response

__all__ = [
    "API_URL",
    "SHOPKEY",
    "SamplePayloads",
    "make_response",
]
