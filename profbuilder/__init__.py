"""
profbuilder - builds pprof-compatible profiles from captured JVM call traces

Example usage:
    >>> from profbuilder import ProfileProtoBuilder, PerfMapFrameCache, StaticMethodResolver
    >>> builder = ProfileProtoBuilder.forCpu(0, PerfMapFrameCache(), StaticMethodResolver())
    >>> builder.addTraces(traces)
    >>> profile = builder.finalize(False)
"""

from .perf_data_struct import (
    ValueType,
    Function,
    Line,
    Location,
    Sample,
    Profile,
    CallFrame,
    CallTrace,
    ProfileStackTrace,
    NATIVE_FRAME_LINE_NUM,
)
from .task.builder import ProfileProtoBuilder, LocationBuilder, TraceSamples, StackState
from .task.builder.sampling import calculateSamplingRatio
from .task.fixer import fixMethodParameters, simplifyFunctionName
from .task.resolver import (
    MethodResolver,
    StaticMethodResolver,
    MethodInfo,
    StackFrameElements,
    NativeFrameCache,
    PerfMapFrameCache,
)
from .utils import ProfilerConfig, ProfileType

__version__ = "0.1.0"
__all__ = [
    # Profile object graph
    'ValueType',
    'Function',
    'Line',
    'Location',
    'Sample',
    'Profile',

    # Raw traces
    'CallFrame',
    'CallTrace',
    'ProfileStackTrace',
    'NATIVE_FRAME_LINE_NUM',

    # Builder
    'ProfileProtoBuilder',
    'LocationBuilder',
    'TraceSamples',
    'StackState',
    'calculateSamplingRatio',
    'fixMethodParameters',
    'simplifyFunctionName',

    # Resolvers
    'MethodResolver',
    'StaticMethodResolver',
    'MethodInfo',
    'StackFrameElements',
    'NativeFrameCache',
    'PerfMapFrameCache',

    # Configuration
    'ProfilerConfig',
    'ProfileType',
]
