"""Tracing and metric helpers backed by OpenTelemetry."""

from __future__ import annotations

import logging
import os
import threading
from collections import defaultdict
from typing import Any, Dict, Iterable

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

_exporter_choice = os.getenv("OTEL_TRACES_EXPORTER", "inmemory")

if _exporter_choice == "console":
    _span_exporter: Any = ConsoleSpanExporter()
else:
    _span_exporter = InMemorySpanExporter()
_tracer_provider = TracerProvider()
_tracer_provider.add_span_processor(SimpleSpanProcessor(_span_exporter))
_meter_provider = MeterProvider()
metrics.set_meter_provider(_meter_provider)

_OBSERVABILITY_LOGGER = logging.getLogger("actuator.observability")

_metrics: Dict[str, float] = {}
_latency_histograms: Dict[str, list[float]] = defaultdict(list)
_counters: Dict[str, Any] = {}
_lock = threading.Lock()


def start_span(name: str):
    """Context manager yielding the active span named *name*."""

    tracer = _tracer_provider.get_tracer("actuator")
    return tracer.start_as_current_span(name)


def get_traces() -> Iterable[object]:
    """Retrieve finished spans kept by the in-memory exporter."""

    if isinstance(_span_exporter, InMemorySpanExporter):
        return _span_exporter.get_finished_spans()
    return ()


def clear_traces() -> None:
    """Drop finished spans kept by the in-memory exporter."""

    if isinstance(_span_exporter, InMemorySpanExporter):
        _span_exporter.clear()


def _counter(name: str) -> Any:
    counter = _counters.get(name)
    if counter is None:
        counter = _meter_provider.get_meter("actuator").create_counter(name)
        _counters[name] = counter
    return counter


def increment_metric(name: str, amount: float = 1.0) -> float:
    """Add *amount* to metric *name* and return the new total."""

    with _lock:
        total = _metrics.get(name, 0.0) + amount
        _metrics[name] = total
        _counter(name).add(amount)
    return total


def get_metric(name: str) -> float:
    """Retrieve a recorded metric."""

    return _metrics.get(name, 0.0)


def record_latency(endpoint: str, duration_ms: float) -> None:
    """Record latency for *endpoint* in milliseconds."""

    with _lock:
        _latency_histograms[endpoint].append(duration_ms)
    if duration_ms > 1000:
        _OBSERVABILITY_LOGGER.warning(
            "Slow action %s took %.1f ms", endpoint, duration_ms
        )


def get_latency_histogram(endpoint: str) -> Iterable[float]:
    """Return recorded latencies for *endpoint*."""

    return _latency_histograms.get(endpoint, [])


def reset_metrics() -> None:
    """Forget recorded metrics and latencies."""

    with _lock:
        _metrics.clear()
        _latency_histograms.clear()


__all__ = [
    "clear_traces",
    "get_latency_histogram",
    "get_metric",
    "get_traces",
    "increment_metric",
    "record_latency",
    "reset_metrics",
    "start_span",
]
