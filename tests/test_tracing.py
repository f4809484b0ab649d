import logging

import pytest

from scavenger_hunt.utils.tracing import get_current_span, trace_span


def test_spans_nest_and_restore_context(caplog):
    caplog.set_level(logging.DEBUG, logger='scavenger_hunt.utils.tracing')

    assert get_current_span() is None
    with trace_span('outer', {'k': 1}) as outer:
        with trace_span('inner') as inner:
            assert get_current_span() is inner
        assert get_current_span() is outer
    assert get_current_span() is None

    assert outer.children == [inner]
    assert inner.path == 'outer > inner'
    assert outer.duration is not None and outer.duration >= 0
    assert any('outer > inner' in r.message for r in caplog.records)


def test_span_marks_failure():
    with pytest.raises(RuntimeError):
        with trace_span('work') as span:
            raise RuntimeError('boom')
    assert span.failed is True
    assert get_current_span() is None
