from .profiler_config import ProfilerConfig, ProfileType, ProfilePreset

__all__ = ["ProfilerConfig", "ProfileType", "ProfilePreset"]
