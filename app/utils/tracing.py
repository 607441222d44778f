from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace


@contextmanager
def traced_span(name: str) -> Iterator[None]:
    """Wrap a block in a span; a no-op until an SDK tracer provider is installed."""
    tracer = trace.get_tracer("wedsite")
    with tracer.start_as_current_span(name):
        yield
