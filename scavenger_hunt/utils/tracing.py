import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

current_span: ContextVar[Optional['TraceSpan']] = ContextVar(
    'current_span', default=None
)

logger = logging.getLogger(__name__)


@dataclass
class TraceSpan:
    '''A timed unit of work, optionally nested under a parent span.'''

    name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    parent: Optional['TraceSpan'] = None
    children: list['TraceSpan'] = field(default_factory=list)
    failed: bool = False

    @property
    def duration(self) -> Optional[float]:
        return self.end_time - self.start_time if self.end_time else None

    @property
    def path(self) -> str:
        if self.parent is None:
            return self.name
        return f'{self.parent.path} > {self.name}'

    def finish(self) -> None:
        self.end_time = time.perf_counter()
        duration_ms = (self.duration or 0) * 1000
        details = ', '.join(f'{k}={v}' for k, v in self.metadata.items())
        status = ' FAILED' if self.failed else ''
        logger.debug(f'{self.path}: {duration_ms:.2f}ms{status} [{details}]')


@contextmanager
def trace_span(
    name: str, metadata: Optional[Dict[str, Any]] = None
) -> Iterator[TraceSpan]:
    '''Time a block of work and log it at DEBUG when it ends.

    Example:
        with trace_span('progress.save', {'key': key}):
            store.set(key, blob)
    '''
    parent = current_span.get()
    span = TraceSpan(name=name, metadata=dict(metadata or {}), parent=parent)
    if parent:
        parent.children.append(span)

    token = current_span.set(span)
    try:
        yield span
    except BaseException:
        span.failed = True
        raise
    finally:
        span.finish()
        current_span.reset(token)


def get_current_span() -> Optional[TraceSpan]:
    return current_span.get()
