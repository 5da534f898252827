from .location_builder import LocationBuilder
from .trace_samples import TraceSamples
from .stack_state import StackState, StackStateType
from .sampling import calculateSamplingRatio, calculateSamplingRatios
from .profile_proto_builder import ProfileProtoBuilder

__all__ = [
    "LocationBuilder", "TraceSamples", "StackState", "StackStateType",
    "calculateSamplingRatio", "calculateSamplingRatios", "ProfileProtoBuilder",
]
