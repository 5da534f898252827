'''
module method resolver
resolution of managed frames into class/method/file/line
'''

from abc import ABC, abstractmethod
from typing import Dict, Hashable, List, Optional, Tuple
from ...perf_data_struct.stack_trace import CallFrame


class StackFrameElements:
    """
    StackFrameElements holds the resolved parts of a managed frame.

    Attributes:
        m_file_name: Source file name
        m_class_name: Fully qualified class name
        m_method_name: Method name
        m_signature: Raw method descriptor, e.g. "(I)V"
        m_line_number: Source line number
    """

    def __init__(self, file_name: str = "", class_name: str = "",
                 method_name: str = "", signature: str = "",
                 line_number: int = 0) -> None:
        self.m_file_name: str = file_name
        self.m_class_name: str = class_name
        self.m_method_name: str = method_name
        self.m_signature: str = signature
        self.m_line_number: int = line_number

    def getFileName(self) -> str:
        return self.m_file_name

    def getClassName(self) -> str:
        return self.m_class_name

    def getMethodName(self) -> str:
        return self.m_method_name

    def getSignature(self) -> str:
        return self.m_signature

    def getLineNumber(self) -> int:
        return self.m_line_number


'''
@class MethodResolver
Interface of managed-frame symbol resolution
'''


class MethodResolver(ABC):
    """
    MethodResolver turns a managed frame into its stack frame elements.

    Implementations wrap whatever symbol source the runtime exposes. They
    must not raise for unknown methods; empty elements are returned instead.
    """

    @abstractmethod
    def getStackFrameElements(self, frame: CallFrame) -> StackFrameElements:
        """
        Resolve a managed frame.

        Args:
            frame: Managed frame with a non-None method identity

        Returns:
            Resolved StackFrameElements
        """
        pass


class MethodInfo:
    """
    Static description of one method known to a StaticMethodResolver.

    Attributes:
        m_file_name: Source file name
        m_class_name: Fully qualified class name, '.' or '/' separated
        m_method_name: Method name
        m_signature: Raw method descriptor
        m_line_table: Sorted (start location, line number) entries
    """

    def __init__(self, file_name: str, class_name: str, method_name: str,
                 signature: str = "",
                 line_table: Optional[List[Tuple[int, int]]] = None) -> None:
        self.m_file_name: str = file_name
        self.m_class_name: str = class_name
        self.m_method_name: str = method_name
        self.m_signature: str = signature
        self.m_line_table: List[Tuple[int, int]] = sorted(line_table) if line_table else []

    def lineFor(self, location: int) -> int:
        """
        Map a capture-time location to a source line.

        The entry with the greatest start location not above `location`
        wins. Without a line table the location is returned as is; before
        the first entry, 0 is returned.
        """
        if not self.m_line_table:
            return location

        line = 0
        for start, line_number in self.m_line_table:
            if start > location:
                break
            line = line_number
        return line


'''
@class StaticMethodResolver
Resolves managed frames from a preloaded method table
'''


class StaticMethodResolver(MethodResolver):
    """
    StaticMethodResolver resolves frames from a dictionary of methods.

    It is used where the method table is known ahead of time, e.g. when
    replaying captured traces offline.

    Attributes:
        m_methods: Dictionary mapping method identities to MethodInfo
    """

    def __init__(self, methods: Optional[Dict[Hashable, MethodInfo]] = None) -> None:
        self.m_methods: Dict[Hashable, MethodInfo] = dict(methods) if methods else {}

    def addMethod(self, method_id: Hashable, info: MethodInfo) -> None:
        """
        Register a method.

        Args:
            method_id: Opaque method identity used in frames
            info: Description of the method
        """
        self.m_methods[method_id] = info

    def getMethodCount(self) -> int:
        """Get the number of registered methods."""
        return len(self.m_methods)

    def getStackFrameElements(self, frame: CallFrame) -> StackFrameElements:
        info = self.m_methods.get(frame.getMethodId())
        if info is None:
            return StackFrameElements()

        return StackFrameElements(
            info.m_file_name,
            info.m_class_name.replace('/', '.'),
            info.m_method_name,
            info.m_signature,
            info.lineFor(frame.getLineNumber()),
        )
