from contextlib import contextmanager

from opentelemetry import trace

_tracer = trace.get_tracer(__name__)


@contextmanager
def trace_user_data(destination: str, present_fields: int):
    with _tracer.start_as_current_span("conversions.hash_user_data") as span:
        span.set_attribute("conversions.destination", destination)
        span.set_attribute("conversions.present_fields", present_fields)
        yield span


@contextmanager
def trace_event(destination: str, evt: dict):
    with _tracer.start_as_current_span("conversions.build_event") as span:
        span.set_attribute("conversions.destination", destination)
        span.set_attribute("event.id", str(evt.get("event_id") or ""))
        span.set_attribute("event.name", str(evt.get("event_name") or ""))
        yield span
