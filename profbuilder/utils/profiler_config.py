'''
module profiler_config

Configuration of the profile builders.
This module defines the per-profile-type presets (value labels, native
frame trimming, unsampling policy) and the configuration object the
builders are constructed from.
'''

from enum import Enum
from typing import Optional, Tuple


class ProfileType(Enum):
    """Kinds of profiles a builder can produce."""
    HEAP = "heap"
    CPU = "cpu"
    CONTENTION = "contention"


class ProfilePreset:
    """
    ProfilePreset describes the fixed settings of one profile type.

    Attributes:
        m_count_type: (name, unit) of the count series
        m_metric_type: (name, unit) of the metric series, also the period type
        m_native_frames_to_skip: Leading native frames added by the capture
            mechanism itself
        m_unsample: Whether finalization unsamples by default
    """

    def __init__(self, count_type: Tuple[str, str], metric_type: Tuple[str, str],
                 native_frames_to_skip: int, unsample: bool) -> None:
        self.m_count_type: Tuple[str, str] = count_type
        self.m_metric_type: Tuple[str, str] = metric_type
        self.m_native_frames_to_skip: int = native_frames_to_skip
        self.m_unsample: bool = unsample

    def getCountType(self) -> Tuple[str, str]:
        return self.m_count_type

    def getMetricType(self) -> Tuple[str, str]:
        return self.m_metric_type

    def getNativeFramesToSkip(self) -> int:
        return self.m_native_frames_to_skip

    def getUnsample(self) -> bool:
        return self.m_unsample


# Heap traces are captured from inside the allocation hook, whose own
# sampler and dispatch frames sit on top of every stack.
PRESETS = {
    ProfileType.HEAP: ProfilePreset(("inuse_objects", "count"),
                                    ("inuse_space", "bytes"), 2, True),
    ProfileType.CPU: ProfilePreset(("samples", "count"),
                                   ("cpu", "nanoseconds"), 0, False),
    ProfileType.CONTENTION: ProfilePreset(("contentions", "count"),
                                          ("delay", "microseconds"), 0, False),
}


class ProfilerConfig:
    """
    ProfilerConfig holds the construction-time settings of a profile builder.

    The sampling rate is expressed in the unit of the metric series; 0 or 1
    disables unsampling. The native frame skip count and the unsampling
    policy default to the preset of the profile type and may be overridden.

    Attributes:
        m_profile_type: Kind of profile
        m_sampling_rate: Sampling rate in metric units
        m_native_frames_to_skip: Leading native frames to trim per trace
        m_unsample: Default unsampling policy at finalization
    """

    def __init__(self, profile_type: ProfileType = ProfileType.CPU,
                 sampling_rate: int = 0,
                 native_frames_to_skip: Optional[int] = None,
                 unsample: Optional[bool] = None) -> None:
        """
        Initialize ProfilerConfig.

        Args:
            profile_type: Kind of profile
            sampling_rate: Sampling rate in metric units
            native_frames_to_skip: Override of the preset's skip count
            unsample: Override of the preset's unsampling policy

        Raises:
            ValueError: If the sampling rate or skip count is negative
        """
        if sampling_rate < 0:
            raise ValueError(f"Sampling rate must not be negative: {sampling_rate}")
        if native_frames_to_skip is not None and native_frames_to_skip < 0:
            raise ValueError(
                f"Native frames to skip must not be negative: {native_frames_to_skip}")

        preset = PRESETS[profile_type]
        self.m_profile_type: ProfileType = profile_type
        self.m_sampling_rate: int = sampling_rate
        self.m_native_frames_to_skip: int = (
            preset.getNativeFramesToSkip() if native_frames_to_skip is None
            else native_frames_to_skip)
        self.m_unsample: bool = preset.getUnsample() if unsample is None else unsample

    @classmethod
    def fromProfileType(cls, name: str, sampling_rate: int = 0) -> 'ProfilerConfig':
        """
        Create a configuration from a profile type name.

        Args:
            name: "heap", "cpu" or "contention" (case-insensitive)
            sampling_rate: Sampling rate in metric units

        Returns:
            ProfilerConfig for the named type

        Raises:
            ValueError: If the name is not a known profile type
        """
        try:
            profile_type = ProfileType(name.lower())
        except ValueError:
            raise ValueError(f"Unknown profile type: {name}") from None
        return cls(profile_type, sampling_rate)

    def getProfileType(self) -> ProfileType:
        """Get the profile type."""
        return self.m_profile_type

    def getPreset(self) -> ProfilePreset:
        """Get the preset of the profile type."""
        return PRESETS[self.m_profile_type]

    def getCountType(self) -> Tuple[str, str]:
        """Get the (name, unit) of the count series."""
        return self.getPreset().getCountType()

    def getMetricType(self) -> Tuple[str, str]:
        """Get the (name, unit) of the metric series."""
        return self.getPreset().getMetricType()

    def getSamplingRate(self) -> int:
        """Get the sampling rate."""
        return self.m_sampling_rate

    def getNativeFramesToSkip(self) -> int:
        """Get the number of leading native frames trimmed per trace."""
        return self.m_native_frames_to_skip

    def getUnsample(self) -> bool:
        """Get the default unsampling policy."""
        return self.m_unsample
