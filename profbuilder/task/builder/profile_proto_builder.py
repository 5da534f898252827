'''
module profile proto builder
folds captured call traces into a deduplicated profile
'''

from typing import Optional, Sequence, Tuple
from ...perf_data_struct.profile_proto import Profile, Sample, ValueType
from ...perf_data_struct.stack_trace import CallFrame, CallTrace, ProfileStackTrace
from ...utils.profiler_config import ProfileType, ProfilerConfig
from ..fixer.name_simplifier import simplifyFunctionName
from ..fixer.signature_parser import fixMethodParameters
from ..resolver.method_resolver import MethodResolver
from ..resolver.native_resolver import NativeFrameCache
from .location_builder import LocationBuilder
from .sampling import calculateSamplingRatios
from .stack_state import StackState
from .trace_samples import TraceSamples

COUNT_INDEX = 0
METRIC_INDEX = 1

UNKNOWN_METHOD_NAME = "Unknown method"

'''
@class ProfileProtoBuilder
Builds a pprof-compatible profile from batches of raw traces
'''


class ProfileProtoBuilder:
    """
    ProfileProtoBuilder aggregates raw call traces into a Profile.

    Each distinct raw trace (by method identities and line numbers) becomes
    one Sample whose values are [count, metric]. Frames of a new trace are
    rendered into interned locations: managed frames via the method
    resolver, the name simplifier and the signature parser; native frames
    via the native frame cache, dropping consecutive repeats of the same
    native function. A trace matching an existing sample only accumulates
    values and never creates locations.

    A builder covers one output window. It is used by a single thread and
    finalized exactly once; the builder must not be used afterwards.

    Attributes:
        m_profile: Profile under construction
        m_location_builder: Location table, keyed by rendered identity
        m_trace_samples: Sample table, keyed by raw identity
        m_native_cache: Native frame resolver
        m_method_resolver: Managed frame resolver
        m_sampling_rate: Sampling rate in metric units
        m_native_frames_to_skip: Leading native frames trimmed per trace
        m_unsample: Default unsampling policy of finalizeDefault()
    """

    def __init__(self, sampling_rate: int, count_type: Tuple[str, str],
                 metric_type: Tuple[str, str], native_cache: NativeFrameCache,
                 method_resolver: MethodResolver,
                 native_frames_to_skip: int = 0, unsample: bool = False) -> None:
        """
        Initialize a ProfileProtoBuilder.

        Args:
            sampling_rate: Sampling rate in metric units (0 or 1: disabled)
            count_type: (name, unit) of the count series
            metric_type: (name, unit) of the metric series and period type
            native_cache: Resolver of native frames
            method_resolver: Resolver of managed frames
            native_frames_to_skip: Leading native frames added by the
                capture mechanism, trimmed from every new trace
            unsample: Unsampling policy used by finalizeDefault()
        """
        self.m_profile: Profile = Profile()
        self.m_location_builder: LocationBuilder = LocationBuilder(self.m_profile)
        self.m_trace_samples: TraceSamples = TraceSamples()
        self.m_native_cache: NativeFrameCache = native_cache
        self.m_method_resolver: MethodResolver = method_resolver
        self.m_sampling_rate: int = sampling_rate
        self.m_native_frames_to_skip: int = native_frames_to_skip
        self.m_unsample: bool = unsample

        self._add_sample_type(count_type)
        self._add_sample_type(metric_type)
        self.m_profile.setPeriodType(ValueType(*metric_type))
        self.m_profile.setPeriod(sampling_rate)

    @classmethod
    def fromConfig(cls, config: ProfilerConfig, native_cache: NativeFrameCache,
                   method_resolver: MethodResolver) -> 'ProfileProtoBuilder':
        """
        Create a builder from a ProfilerConfig.

        Args:
            config: Builder configuration
            native_cache: Resolver of native frames
            method_resolver: Resolver of managed frames

        Returns:
            Configured ProfileProtoBuilder
        """
        return cls(config.getSamplingRate(), config.getCountType(),
                   config.getMetricType(), native_cache, method_resolver,
                   config.getNativeFramesToSkip(), config.getUnsample())

    @classmethod
    def forHeap(cls, sampling_rate: int, native_cache: NativeFrameCache,
                method_resolver: MethodResolver) -> 'ProfileProtoBuilder':
        """Create a builder for heap allocation profiles."""
        return cls.fromConfig(ProfilerConfig(ProfileType.HEAP, sampling_rate),
                              native_cache, method_resolver)

    @classmethod
    def forCpu(cls, sampling_rate: int, native_cache: NativeFrameCache,
               method_resolver: MethodResolver) -> 'ProfileProtoBuilder':
        """Create a builder for CPU profiles."""
        return cls.fromConfig(ProfilerConfig(ProfileType.CPU, sampling_rate),
                              native_cache, method_resolver)

    @classmethod
    def forContention(cls, sampling_rate: int, native_cache: NativeFrameCache,
                      method_resolver: MethodResolver) -> 'ProfileProtoBuilder':
        """Create a builder for lock contention profiles."""
        return cls.fromConfig(ProfilerConfig(ProfileType.CONTENTION, sampling_rate),
                              native_cache, method_resolver)

    def _add_sample_type(self, sample_type: Tuple[str, str]) -> None:
        self.m_profile.addSampleType(ValueType(*sample_type))

    def addTraces(self, traces: Sequence[ProfileStackTrace],
                  counts: Optional[Sequence[int]] = None) -> None:
        """
        Add a batch of traces.

        The native frame cache sees the whole batch before any trace is
        folded in.

        Args:
            traces: Captured traces
            counts: Optional weight per trace, 1 for each trace if omitted

        Raises:
            ValueError: If counts is given with a length other than traces'
        """
        if counts is not None and len(counts) != len(traces):
            raise ValueError(
                f"Expected {len(traces)} counts, got {len(counts)}")

        self.m_native_cache.processTraces(traces)

        for i, trace in enumerate(traces):
            self._add_trace(trace, counts[i] if counts is not None else 1)

    def addArtificialTrace(self, name: str, count: int, sampling_rate: int) -> None:
        """
        Add a sample that does not come from a captured trace.

        Used for bookkeeping entries, e.g. to account for dropped samples.

        Args:
            name: Name of the single location of the sample
            count: Number of events
            sampling_rate: Metric units per event
        """
        location = self.m_location_builder.locationFor(name, name, "", -1)

        sample = self.m_profile.addSample()
        sample.addLocationId(location.getId())
        self._init_sample_values(sample, count, count * sampling_rate)

    def finalize(self, unsample: bool) -> Profile:
        """
        Finish the profile.

        Args:
            unsample: Whether to rescale every sample by its sampling ratio

        Returns:
            The finished Profile
        """
        if unsample:
            self._unsample_metrics()
        return self.m_profile

    def finalizeDefault(self) -> Profile:
        """Finish the profile with the configured unsampling policy."""
        return self.finalize(self.m_unsample)

    def createSampledProfile(self) -> Profile:
        """Finish the profile without unsampling."""
        return self.finalize(False)

    def createUnsampledProfile(self) -> Profile:
        """Finish the profile with unsampling."""
        return self.finalize(True)

    def getSamplingRate(self) -> int:
        """Get the sampling rate."""
        return self.m_sampling_rate

    def getLocationBuilder(self) -> LocationBuilder:
        """Get the location table of this builder."""
        return self.m_location_builder

    def _unsample_metrics(self) -> None:
        samples = self.m_profile.getSamples()
        if not samples:
            return

        counts = [sample.getValue(COUNT_INDEX) for sample in samples]
        metrics = [sample.getValue(METRIC_INDEX) for sample in samples]
        ratios = calculateSamplingRatios(self.m_sampling_rate, counts, metrics)

        for sample, count, metric, ratio in zip(samples, counts, metrics, ratios):
            sample.setValue(COUNT_INDEX, int(count * ratio))
            sample.setValue(METRIC_INDEX, int(metric * ratio))

    def _init_sample_values(self, sample: Sample, count: int, metric: int) -> None:
        sample.addValue(count)
        sample.addValue(metric)

    def _update_sample_values(self, sample: Sample, count: int, metric: int) -> None:
        sample.setValue(COUNT_INDEX, sample.getValue(COUNT_INDEX) + count)
        sample.setValue(METRIC_INDEX, sample.getValue(METRIC_INDEX) + metric)

    def _skip_top_native_frames(self, trace: CallTrace) -> int:
        frames = trace.getFrames()
        first_frame = 0
        while (first_frame < self.m_native_frames_to_skip
               and first_frame < len(frames)
               and frames[first_frame].isNative()):
            first_frame += 1
        return first_frame

    def _add_trace(self, trace: ProfileStackTrace, count: int) -> None:
        call_trace = trace.getTrace()

        sample = self.m_trace_samples.sampleFor(call_trace)
        if sample is not None:
            self._update_sample_values(sample, count, trace.getMetricValue())
            return

        sample = self.m_profile.addSample()
        self.m_trace_samples.add(call_trace, sample)
        self._init_sample_values(sample, count, trace.getMetricValue())

        stack_state = StackState()
        frames = call_trace.getFrames()
        for i in range(self._skip_top_native_frames(call_trace), len(frames)):
            frame = frames[i]
            if frame.isNative():
                self._add_native_info(frame, sample, stack_state)
            else:
                self._add_java_info(frame, sample, stack_state)

    def _add_java_info(self, frame: CallFrame, sample: Sample,
                       stack_state: StackState) -> None:
        stack_state.javaFrame()

        if frame.getMethodId() is None:
            location = self.m_location_builder.locationFor(
                "", UNKNOWN_METHOD_NAME, "", 0)
            sample.addLocationId(location.getId())
            return

        elements = self.m_method_resolver.getStackFrameElements(frame)
        class_name = elements.getClassName()
        signature = fixMethodParameters(elements.getSignature()) or ""
        full_method_name = simplifyFunctionName(
            class_name + "." + elements.getMethodName()) + signature

        location = self.m_location_builder.locationFor(
            class_name, full_method_name, elements.getFileName(),
            elements.getLineNumber())
        sample.addLocationId(location.getId())

    def _add_native_info(self, frame: CallFrame, sample: Sample,
                         stack_state: StackState) -> None:
        stack_state.nativeFrame(self.m_native_cache.getFunctionName(frame))

        if not stack_state.skipFrame():
            location = self.m_native_cache.getLocation(frame, self.m_location_builder)
            sample.addLocationId(location.getId())
