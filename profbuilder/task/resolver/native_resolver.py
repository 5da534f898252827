'''
module native resolver
resolution and caching of native frame symbols
'''

import bisect
import os
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple
from ...perf_data_struct.profile_proto import Location
from ...perf_data_struct.stack_trace import CallFrame, ProfileStackTrace

if TYPE_CHECKING:
    from ..builder.location_builder import LocationBuilder

'''
@class NativeFrameCache
Interface of native-frame symbol resolution
'''


class NativeFrameCache(ABC):
    """
    NativeFrameCache renders native frames and owns their locations.

    The profile builder hands each batch to processTraces() before walking
    it, so implementations can resolve all new addresses in one pass.
    """

    @abstractmethod
    def processTraces(self, traces: Iterable[ProfileStackTrace]) -> None:
        """
        Pre-resolve the native frames of a batch.

        Args:
            traces: Batch about to be added to the builder
        """
        pass

    @abstractmethod
    def getFunctionName(self, frame: CallFrame) -> str:
        """
        Get the rendered function name of a native frame.

        Args:
            frame: Native frame

        Returns:
            Rendered name
        """
        pass

    @abstractmethod
    def getLocation(self, frame: CallFrame,
                    location_builder: 'LocationBuilder') -> Location:
        """
        Get the location of a native frame.

        Args:
            frame: Native frame
            location_builder: Location table of the calling builder

        Returns:
            Interned Location
        """
        pass


'''
@class PerfMapFrameCache
Resolves native frames from perf-map symbol files
'''


class PerfMapFrameCache(NativeFrameCache):
    """
    PerfMapFrameCache resolves native function pointers via perf maps.

    A perf map is a text file with one "START SIZE name" line per symbol,
    START and SIZE in hexadecimal, as written by JIT agents to
    /tmp/perf-<pid>.map. An address resolves to the symbol whose range
    [START, START + SIZE) contains it; unresolved addresses are rendered as
    "0x<hex>". Resolved names are cached per address.

    Each distinct address gets its own Location so the address stamped on
    it stays the one first seen; addresses resolving to the same symbol
    share one interned Function.

    Attributes:
        m_starts: Sorted symbol start addresses
        m_symbols: (start, size, name) entries aligned with m_starts
        m_names: Cache of rendered names per address
        m_locations: Locations per address for the current location builder
        m_location_owner: Location builder the cached locations belong to
    """

    def __init__(self, symbols: Optional[Iterable[Tuple[int, int, str]]] = None) -> None:
        """
        Initialize a PerfMapFrameCache.

        Args:
            symbols: Optional (start, size, name) entries to preload
        """
        self.m_starts: List[int] = []
        self.m_symbols: List[Tuple[int, int, str]] = []
        self.m_names: Dict[int, str] = {}
        self.m_locations: Dict[int, Location] = {}
        self.m_location_owner: Optional['LocationBuilder'] = None
        if symbols is not None:
            for start, size, name in symbols:
                self.addSymbol(start, size, name)

    def addSymbol(self, start: int, size: int, name: str) -> None:
        """
        Register one symbol range.

        Args:
            start: Start address
            size: Size of the range in bytes
            name: Symbol name
        """
        index = bisect.bisect_right(self.m_starts, start)
        self.m_starts.insert(index, start)
        self.m_symbols.insert(index, (start, size, name))
        self.m_names.clear()

    def getSymbolCount(self) -> int:
        """Get the number of registered symbols."""
        return len(self.m_symbols)

    def loadPerfMap(self, file_path: str) -> int:
        """
        Load symbols from a perf-map file.

        Malformed lines are skipped with a warning.

        Args:
            file_path: Path to the perf-map file

        Returns:
            Number of symbols loaded

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Perf map file not found: {file_path}")

        loaded = 0
        with open(file_path, 'r') as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                parts = line.split(None, 2)
                try:
                    start = int(parts[0], 16)
                    size = int(parts[1], 16)
                    name = parts[2]
                except (IndexError, ValueError):
                    print(f"Warning: skipping malformed perf map line {line_no} "
                          f"in {file_path}: {line!r}", file=sys.stderr)
                    continue
                self.addSymbol(start, size, name)
                loaded += 1
        return loaded

    def _resolve(self, address: int) -> str:
        index = bisect.bisect_right(self.m_starts, address) - 1
        if index >= 0:
            start, size, name = self.m_symbols[index]
            if address < start + size:
                return name
        return f"0x{address:x}"

    def processTraces(self, traces: Iterable[ProfileStackTrace]) -> None:
        for trace in traces:
            for frame in trace.getTrace().getFrames():
                if frame.isNative() and frame.getMethodId() not in self.m_names:
                    self.m_names[frame.getMethodId()] = self._resolve(frame.getMethodId())

    def getFunctionName(self, frame: CallFrame) -> str:
        address = frame.getMethodId()
        name = self.m_names.get(address)
        if name is None:
            name = self._resolve(address)
            self.m_names[address] = name
        return name

    def getLocation(self, frame: CallFrame,
                    location_builder: 'LocationBuilder') -> Location:
        if location_builder is not self.m_location_owner:
            self.m_locations.clear()
            self.m_location_owner = location_builder

        address = frame.getMethodId()
        location = self.m_locations.get(address)
        if location is None:
            profile = location_builder.getProfile()
            location = profile.addLocation()
            location.addLine(profile.functionId(self.getFunctionName(frame)), 0)
            location.setAddress(address)
            self.m_locations[address] = location
        return location
