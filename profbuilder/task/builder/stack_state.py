'''
module stack state
'''

from enum import Enum
from typing import Optional


class StackStateType(Enum):
    """States of the per-trace native frame classifier."""
    INITIAL = "initial"
    IN_NATIVE_RUN = "in_native_run"
    IN_JAVA_RUN = "in_java_run"


'''
@class StackState
Decides which native frames of a trace are redundant
'''


class StackState:
    """
    StackState tracks the frames seen so far while walking one trace.

    Consecutive native frames with the same rendered name are usually
    stub or dispatch artifacts of one logical call; only the first of such
    a run is kept. A managed frame ends any native run. A fresh StackState
    is used for every trace.

    Attributes:
        m_state: Current state
        m_native_name: Name of the current native run, if any
        m_skip: Whether the last native frame should be skipped
    """

    def __init__(self) -> None:
        self.m_state: StackStateType = StackStateType.INITIAL
        self.m_native_name: Optional[str] = None
        self.m_skip: bool = False

    def javaFrame(self) -> None:
        """Record a managed frame."""
        self.m_state = StackStateType.IN_JAVA_RUN
        self.m_native_name = None
        self.m_skip = False

    def nativeFrame(self, function_name: str) -> None:
        """
        Record a native frame.

        Args:
            function_name: Rendered name of the native function
        """
        if (self.m_state == StackStateType.IN_NATIVE_RUN
                and self.m_native_name == function_name):
            self.m_skip = True
            return

        self.m_state = StackStateType.IN_NATIVE_RUN
        self.m_native_name = function_name
        self.m_skip = False

    def skipFrame(self) -> bool:
        """Check whether the last recorded frame is a redundant repeat."""
        return self.m_skip

    def getState(self) -> StackStateType:
        """Get the current state."""
        return self.m_state
