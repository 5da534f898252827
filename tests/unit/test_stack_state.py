"""
Unit tests for StackState
"""
import pytest
from profbuilder.task.builder.stack_state import StackState, StackStateType


class TestStackState:
    """Test the native frame classifier"""

    def test_initial_state(self):
        """Test a fresh state"""
        state = StackState()
        assert state.getState() == StackStateType.INITIAL
        assert state.skipFrame() is False

    def test_first_native_frame_kept(self):
        """Test the first native frame is kept"""
        state = StackState()
        state.nativeFrame("memcpy")
        assert state.getState() == StackStateType.IN_NATIVE_RUN
        assert state.skipFrame() is False

    def test_consecutive_same_name_skipped(self):
        """Test repeats of the same native name are skipped"""
        state = StackState()
        state.nativeFrame("stub")
        state.nativeFrame("stub")
        assert state.skipFrame() is True
        state.nativeFrame("stub")
        assert state.skipFrame() is True

    def test_different_name_kept(self):
        """Test a differently named native frame is kept"""
        state = StackState()
        state.nativeFrame("stub")
        state.nativeFrame("stub")
        state.nativeFrame("dispatch")
        assert state.skipFrame() is False
        assert state.getState() == StackStateType.IN_NATIVE_RUN

    def test_java_frame_resets_run(self):
        """Test a managed frame ends the native run"""
        state = StackState()
        state.nativeFrame("stub")
        state.nativeFrame("stub")
        state.javaFrame()
        assert state.getState() == StackStateType.IN_JAVA_RUN
        assert state.skipFrame() is False

        state.nativeFrame("stub")
        assert state.skipFrame() is False
