import pytest
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY

from seqkit.config import METRICS_ENABLED_ENV, reset_settings
from seqkit.errors import EmptySequenceError
from seqkit.observability.metrics import (
    OPERATION_COUNT_NAME,
    OPERATION_ERROR_COUNT_NAME,
    instrumented,
    render_metrics,
)
from seqkit.services.numeric import mean


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_successful_call_is_counted(monkeypatch):
    monkeypatch.delenv(METRICS_ENABLED_ENV, raising=False)
    before = sample(OPERATION_COUNT_NAME, operation="mean", status="ok")
    mean([1, 2, 3])
    assert sample(OPERATION_COUNT_NAME, operation="mean", status="ok") == before + 1


def test_failed_call_is_counted_and_reraised(monkeypatch):
    monkeypatch.delenv(METRICS_ENABLED_ENV, raising=False)
    before = sample(OPERATION_ERROR_COUNT_NAME, operation="mean", error="EmptySequenceError")
    with pytest.raises(EmptySequenceError):
        mean([])
    after = sample(OPERATION_ERROR_COUNT_NAME, operation="mean", error="EmptySequenceError")
    assert after == before + 1


def test_latency_is_observed(monkeypatch):
    monkeypatch.delenv(METRICS_ENABLED_ENV, raising=False)

    @instrumented("test_latency_op")
    def op():
        return 42

    assert op() == 42
    assert sample("seqkit_operation_duration_seconds_count", operation="test_latency_op") == 1


def test_disabled_metrics_skip_recording(monkeypatch):
    monkeypatch.setenv(METRICS_ENABLED_ENV, "0")

    @instrumented("test_disabled_op")
    def op():
        return "done"

    assert op() == "done"
    assert sample(OPERATION_COUNT_NAME, operation="test_disabled_op", status="ok") == 0.0


def test_wrapper_keeps_metadata():
    assert mean.__name__ == "mean"
    assert "double precision" in mean.__doc__


def test_render_metrics():
    mean([1.0])
    body, content_type = render_metrics()
    text = body.decode()
    assert content_type == CONTENT_TYPE_LATEST
    assert "seqkit_operation_total" in text
    assert "seqkit_operation_duration_seconds_bucket" in text
