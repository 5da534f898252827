"""
Unit tests for the method and native frame resolvers
"""
import os
import tempfile

import pytest
from profbuilder.perf_data_struct.profile_proto import Profile
from profbuilder.perf_data_struct.stack_trace import CallFrame, CallTrace, ProfileStackTrace
from profbuilder.task.builder.location_builder import LocationBuilder
from profbuilder.task.resolver.method_resolver import MethodInfo, StaticMethodResolver
from profbuilder.task.resolver.native_resolver import PerfMapFrameCache


class TestStaticMethodResolver:
    """Test StaticMethodResolver"""

    def test_resolve_known_method(self):
        """Test resolving a registered method"""
        resolver = StaticMethodResolver()
        resolver.addMethod(1, MethodInfo("Foo.java", "com/foo/Foo", "run", "()V"))
        elements = resolver.getStackFrameElements(CallFrame(42, 1))

        assert elements.getFileName() == "Foo.java"
        assert elements.getClassName() == "com.foo.Foo"
        assert elements.getMethodName() == "run"
        assert elements.getSignature() == "()V"
        assert elements.getLineNumber() == 42

    def test_resolve_unknown_method(self):
        """Test an unknown method resolves to empty elements"""
        elements = StaticMethodResolver().getStackFrameElements(CallFrame(3, "nope"))
        assert elements.getClassName() == ""
        assert elements.getMethodName() == ""
        assert elements.getLineNumber() == 0

    def test_line_table(self):
        """Test capture locations map through the line table"""
        info = MethodInfo("Foo.java", "Foo", "run", "()V",
                          line_table=[(10, 21), (0, 20), (25, 23)])
        assert info.lineFor(0) == 20
        assert info.lineFor(9) == 20
        assert info.lineFor(10) == 21
        assert info.lineFor(100) == 23
        assert info.lineFor(-1) == 0

    def test_constructor_methods(self):
        """Test methods passed to the constructor"""
        resolver = StaticMethodResolver({"a": MethodInfo("A.java", "A", "a")})
        assert resolver.getMethodCount() == 1


class TestPerfMapFrameCache:
    """Test PerfMapFrameCache"""

    def test_resolve_in_range(self):
        """Test addresses inside a symbol range resolve to it"""
        cache = PerfMapFrameCache([(0x1000, 0x100, "memcpy"), (0x2000, 0x10, "stub")])
        assert cache.getFunctionName(CallFrame.native(0x1000)) == "memcpy"
        assert cache.getFunctionName(CallFrame.native(0x10ff)) == "memcpy"
        assert cache.getFunctionName(CallFrame.native(0x200f)) == "stub"

    def test_resolve_out_of_range(self):
        """Test unresolved addresses render as hex"""
        cache = PerfMapFrameCache([(0x1000, 0x100, "memcpy")])
        assert cache.getFunctionName(CallFrame.native(0x1100)) == "0x1100"
        assert cache.getFunctionName(CallFrame.native(0x10)) == "0x10"

    def test_process_traces_caches_names(self):
        """Test processTraces pre-resolves native frames only"""
        cache = PerfMapFrameCache([(0x1000, 0x100, "memcpy")])
        trace = CallTrace([CallFrame.native(0x1004), CallFrame(5, "java_method")])
        cache.processTraces([ProfileStackTrace(trace, 1)])
        assert cache.m_names == {0x1004: "memcpy"}

    def test_location_per_address(self):
        """Test native locations are interned per address and share the function"""
        cache = PerfMapFrameCache([(0x1000, 0x100, "memcpy")])
        locations = LocationBuilder(Profile())
        first = cache.getLocation(CallFrame.native(0x1000), locations)
        second = cache.getLocation(CallFrame.native(0x1008), locations)
        assert first is not second
        assert cache.getLocation(CallFrame.native(0x1000), locations) is first
        assert first.getAddress() == 0x1000
        assert second.getAddress() == 0x1008
        assert first.getLines()[0].getFunctionId() == second.getLines()[0].getFunctionId()
        assert len(locations.getProfile().getFunctions()) == 1
        assert locations.getProfile().getFunctionName(second.getId()) == "memcpy"

    def test_locations_reset_for_new_builder(self):
        """Test cached locations are not reused across location builders"""
        cache = PerfMapFrameCache([(0x1000, 0x100, "memcpy")])
        first = cache.getLocation(CallFrame.native(0x1000), LocationBuilder(Profile()))
        other = LocationBuilder(Profile())
        second = cache.getLocation(CallFrame.native(0x1000), other)
        assert first is not second
        assert other.getProfile().getLocation(second.getId()) is second

    def test_load_perf_map(self):
        """Test loading a perf map file with a malformed line"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.map', delete=False) as f:
            f.write("7f0000001000 40 Interpreter\n")
            f.write("\n")
            f.write("not-a-line\n")
            f.write("7f0000002000 20 LambdaForm$MH.invoke\n")
            temp_file = f.name

        try:
            cache = PerfMapFrameCache()
            assert cache.loadPerfMap(temp_file) == 2
            assert cache.getSymbolCount() == 2
            assert cache.getFunctionName(CallFrame.native(0x7f0000001010)) == "Interpreter"
            assert cache.getFunctionName(CallFrame.native(0x7f0000002000)) == "LambdaForm$MH.invoke"
        finally:
            os.unlink(temp_file)

    def test_load_perf_map_warns(self, capsys):
        """Test malformed lines are reported on stderr"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.map', delete=False) as f:
            f.write("zz 10 bad\n")
            temp_file = f.name

        try:
            assert PerfMapFrameCache().loadPerfMap(temp_file) == 0
            assert "malformed perf map line 1" in capsys.readouterr().err
        finally:
            os.unlink(temp_file)

    def test_load_missing_file(self):
        """Test a missing file raises"""
        with pytest.raises(FileNotFoundError):
            PerfMapFrameCache().loadPerfMap("/nonexistent/perf-1.map")
