'''
module stack trace
raw call traces as delivered by the capture mechanism
'''

from typing import Hashable, Iterable, Optional, Sequence, Tuple

# Line number marking a native frame; its method_id holds the function pointer.
NATIVE_FRAME_LINE_NUM = -99

TraceKey = Tuple[Tuple[Optional[Hashable], int], ...]


'''
@class CallFrame
One raw frame of a captured stack
'''


class CallFrame:
    """
    CallFrame is one raw frame of a captured call stack.

    For managed frames, m_method_id is an opaque hashable method identity
    (or None if the capture could not identify the method) and
    m_line_number is the capture-time location within the method. For native
    frames, m_line_number equals NATIVE_FRAME_LINE_NUM and m_method_id is the
    raw native function pointer.

    Attributes:
        m_line_number: Capture-time line number, or the native marker
        m_method_id: Method identity or native function pointer
    """

    __slots__ = ("m_line_number", "m_method_id")

    def __init__(self, line_number: int, method_id: Optional[Hashable]) -> None:
        self.m_line_number: int = line_number
        self.m_method_id: Optional[Hashable] = method_id

    @classmethod
    def native(cls, function_pointer: int) -> 'CallFrame':
        """Create a native frame for a raw function pointer."""
        return cls(NATIVE_FRAME_LINE_NUM, function_pointer)

    def getLineNumber(self) -> int:
        """Get the capture-time line number."""
        return self.m_line_number

    def getMethodId(self) -> Optional[Hashable]:
        """Get the method identity or native function pointer."""
        return self.m_method_id

    def isNative(self) -> bool:
        """Check whether this frame is a native frame."""
        return self.m_line_number == NATIVE_FRAME_LINE_NUM

    def __repr__(self) -> str:
        return f"CallFrame({self.m_line_number}, {self.m_method_id!r})"


'''
@class CallTrace
Leaf-first sequence of raw frames
'''


class CallTrace:
    """
    CallTrace is an ordered, leaf-first sequence of raw frames.

    Attributes:
        m_frames: Frames of the trace, leaf first
    """

    def __init__(self, frames: Optional[Iterable[CallFrame]] = None) -> None:
        self.m_frames: Tuple[CallFrame, ...] = tuple(frames) if frames is not None else ()

    def getFrames(self) -> Sequence[CallFrame]:
        """Get the frames, leaf first."""
        return self.m_frames

    def getNumFrames(self) -> int:
        """Get the number of frames."""
        return len(self.m_frames)

    def traceKey(self) -> TraceKey:
        """
        Build the raw-identity key of this trace.

        The key is a copy of the (method identity, line number) sequence and
        does not reference the frames, so it stays valid however long the
        capture buffer lives.

        Returns:
            Tuple of (method_id, line_number) pairs
        """
        return tuple((frame.m_method_id, frame.m_line_number) for frame in self.m_frames)


'''
@class ProfileStackTrace
A captured trace together with its metric value
'''


class ProfileStackTrace:
    """
    ProfileStackTrace pairs a captured trace with one metric value.

    The metric is whatever the capture source measures for the whole trace,
    e.g. allocated bytes, CPU nanoseconds or contention delay.

    Attributes:
        m_trace: The raw call trace
        m_metric_value: Metric value of the trace
    """

    def __init__(self, trace: CallTrace, metric_value: int = 0) -> None:
        self.m_trace: CallTrace = trace
        self.m_metric_value: int = metric_value

    def getTrace(self) -> CallTrace:
        """Get the raw call trace."""
        return self.m_trace

    def getMetricValue(self) -> int:
        """Get the metric value."""
        return self.m_metric_value
