from .profile_proto import ValueType, Function, Line, Location, Sample, Profile
from .stack_trace import CallFrame, CallTrace, ProfileStackTrace, NATIVE_FRAME_LINE_NUM

__all__ = [
    "ValueType", "Function", "Line", "Location", "Sample", "Profile",
    "CallFrame", "CallTrace", "ProfileStackTrace", "NATIVE_FRAME_LINE_NUM",
]
