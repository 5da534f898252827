'''
module trace samples
'''

from typing import Dict, Optional
from ...perf_data_struct.profile_proto import Sample
from ...perf_data_struct.stack_trace import CallTrace, TraceKey

'''
@class TraceSamples
Aggregation table keyed by raw trace identity
'''


class TraceSamples:
    """
    TraceSamples maps raw call traces to the samples they accumulate into.

    Hashing and equality use only the raw (method identity, line number)
    sequence of a trace, never rendered names: two traces with the same
    shape always share a sample, and traces differing in one frame's
    identity or line never do.

    Attributes:
        m_traces: Dictionary mapping trace keys to samples
    """

    def __init__(self) -> None:
        """Initialize an empty TraceSamples table."""
        self.m_traces: Dict[TraceKey, Sample] = {}

    def sampleFor(self, trace: CallTrace) -> Optional[Sample]:
        """
        Look up the sample of a raw trace.

        Args:
            trace: Raw call trace

        Returns:
            The Sample registered for an identical trace, or None
        """
        return self.m_traces.get(trace.traceKey())

    def add(self, trace: CallTrace, sample: Sample) -> None:
        """
        Register a sample under a raw trace.

        Args:
            trace: Raw call trace
            sample: Sample accumulating this trace
        """
        self.m_traces[trace.traceKey()] = sample

    def getTraceCount(self) -> int:
        """Get the number of distinct raw traces."""
        return len(self.m_traces)
