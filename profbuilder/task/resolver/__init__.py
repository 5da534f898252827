from .method_resolver import MethodResolver, StaticMethodResolver, MethodInfo, StackFrameElements
from .native_resolver import NativeFrameCache, PerfMapFrameCache

__all__ = [
    "MethodResolver", "StaticMethodResolver", "MethodInfo", "StackFrameElements",
    "NativeFrameCache", "PerfMapFrameCache",
]
