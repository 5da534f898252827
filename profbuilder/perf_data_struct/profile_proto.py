'''
module profile proto
in-memory object graph of a pprof-compatible profile
'''

from typing import Any, Dict, List, Optional, Tuple

'''
@class ValueType
A (type, unit) pair describing one value column
'''


class ValueType:
    """
    ValueType describes one column of sample values, or the period type.

    Attributes:
        m_type: Name of the value (e.g., "samples", "inuse_space")
        m_unit: Unit of the value (e.g., "count", "bytes")
    """

    def __init__(self, value_type: str = "", unit: str = "") -> None:
        self.m_type: str = value_type
        self.m_unit: str = unit

    def getType(self) -> str:
        """Get the value type name."""
        return self.m_type

    def getUnit(self) -> str:
        """Get the unit."""
        return self.m_unit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueType):
            return NotImplemented
        return self.m_type == other.m_type and self.m_unit == other.m_unit

    def __hash__(self) -> int:
        return hash((self.m_type, self.m_unit))

    def __repr__(self) -> str:
        return f"ValueType({self.m_type!r}, {self.m_unit!r})"


'''
@class Function
A named function record referenced by location lines
'''


class Function:
    """
    Function is a name/file record referenced by the lines of locations.

    Attributes:
        m_id: Dense identifier, starting at 1
        m_name: Display name of the function
        m_system_name: Raw (unsimplified) name, empty when not tracked
        m_filename: Source file name
        m_start_line: First line of the function, 0 when unknown
    """

    def __init__(self, function_id: int, name: str, filename: str = "",
                 system_name: str = "", start_line: int = 0) -> None:
        self.m_id: int = function_id
        self.m_name: str = name
        self.m_system_name: str = system_name
        self.m_filename: str = filename
        self.m_start_line: int = start_line

    def getId(self) -> int:
        """Get the function ID."""
        return self.m_id

    def getName(self) -> str:
        """Get the function name."""
        return self.m_name

    def getSystemName(self) -> str:
        """Get the system name."""
        return self.m_system_name

    def getFilename(self) -> str:
        """Get the source file name."""
        return self.m_filename

    def getStartLine(self) -> int:
        """Get the start line."""
        return self.m_start_line


class Line:
    """One (function, line number) entry of a location."""

    def __init__(self, function_id: int, line: int) -> None:
        self.m_function_id: int = function_id
        self.m_line: int = line

    def getFunctionId(self) -> int:
        return self.m_function_id

    def getLine(self) -> int:
        return self.m_line


'''
@class Location
One stack-frame entry of the profile
'''


class Location:
    """
    Location is one stack-frame entry, referencing a function and line.

    Attributes:
        m_id: Dense identifier, starting at 1
        m_lines: Line entries of this location (one per inlined frame)
        m_address: Instruction address, 0 unless set for a native frame
    """

    def __init__(self, location_id: int) -> None:
        self.m_id: int = location_id
        self.m_lines: List[Line] = []
        self.m_address: int = 0

    def getId(self) -> int:
        """Get the location ID."""
        return self.m_id

    def addLine(self, function_id: int, line: int) -> Line:
        """
        Append a line entry to the location.

        Args:
            function_id: ID of the function the line belongs to
            line: Source line number

        Returns:
            The created Line
        """
        entry = Line(function_id, line)
        self.m_lines.append(entry)
        return entry

    def getLines(self) -> List[Line]:
        """Get the line entries."""
        return self.m_lines

    def getAddress(self) -> int:
        """Get the instruction address."""
        return self.m_address

    def setAddress(self, address: int) -> None:
        """Set the instruction address."""
        self.m_address = address


'''
@class Sample
One aggregated, distinct call stack
'''


class Sample:
    """
    Sample is one distinct call stack with its accumulated values.

    Location IDs are stored leaf first. The value vector is aligned with
    the sample types of the owning profile.

    Attributes:
        m_location_ids: Location IDs of the stack, leaf first
        m_values: Accumulated values, one per sample type
    """

    def __init__(self) -> None:
        self.m_location_ids: List[int] = []
        self.m_values: List[int] = []

    def addLocationId(self, location_id: int) -> None:
        """Append a location ID (callers append leaf first)."""
        self.m_location_ids.append(location_id)

    def getLocationIds(self) -> List[int]:
        """Get the location IDs, leaf first."""
        return self.m_location_ids

    def addValue(self, value: int) -> None:
        """Append a value column."""
        self.m_values.append(value)

    def getValues(self) -> List[int]:
        """Get the value vector."""
        return self.m_values

    def getValue(self, index: int) -> int:
        """Get one value column."""
        return self.m_values[index]

    def setValue(self, index: int, value: int) -> None:
        """Set one value column."""
        self.m_values[index] = value


'''
@class Profile
Container of sample types, locations, functions and samples
'''


class Profile:
    """
    Profile is the output of the profile builder.

    It holds the sample types, the period type, and dense ID-indexed tables
    of locations and functions: the entry at index i has ID i + 1. Functions
    are interned by (name, system name, file name, start line), so several
    locations may share one function.

    Attributes:
        m_sample_type: Ordered list of sample value types
        m_period_type: Type of the sampling period
        m_period: Sampling period, in units of the period type
        m_samples: Ordered list of samples
        m_locations: Location table, index i holds ID i + 1
        m_functions: Function table, index i holds ID i + 1
        m_function_ids: Interning map for functions
    """

    def __init__(self) -> None:
        self.m_sample_type: List[ValueType] = []
        self.m_period_type: ValueType = ValueType()
        self.m_period: int = 0
        self.m_samples: List[Sample] = []
        self.m_locations: List[Location] = []
        self.m_functions: List[Function] = []
        self.m_function_ids: Dict[Tuple[str, str, str, int], int] = {}

    def addSampleType(self, sample_type: ValueType) -> None:
        """Append a sample value type."""
        self.m_sample_type.append(sample_type)

    def getSampleTypes(self) -> List[ValueType]:
        """Get the sample value types."""
        return self.m_sample_type

    def setPeriodType(self, period_type: ValueType) -> None:
        """Set the period type."""
        self.m_period_type = period_type

    def getPeriodType(self) -> ValueType:
        """Get the period type."""
        return self.m_period_type

    def setPeriod(self, period: int) -> None:
        """Set the sampling period."""
        self.m_period = period

    def getPeriod(self) -> int:
        """Get the sampling period."""
        return self.m_period

    def addSample(self) -> Sample:
        """
        Append a new empty sample.

        Returns:
            The created Sample
        """
        sample = Sample()
        self.m_samples.append(sample)
        return sample

    def getSamples(self) -> List[Sample]:
        """Get all samples."""
        return self.m_samples

    def getSampleCount(self) -> int:
        """Get the number of samples."""
        return len(self.m_samples)

    def addLocation(self) -> Location:
        """
        Append a new location with the next dense ID.

        Returns:
            The created Location
        """
        location = Location(len(self.m_locations) + 1)
        self.m_locations.append(location)
        return location

    def getLocations(self) -> List[Location]:
        """Get the location table."""
        return self.m_locations

    def getLocation(self, location_id: int) -> Optional[Location]:
        """
        Get a location by ID.

        Args:
            location_id: ID of the location

        Returns:
            The Location, or None if the ID is not allocated
        """
        if 1 <= location_id <= len(self.m_locations):
            return self.m_locations[location_id - 1]
        return None

    def functionId(self, name: str, system_name: str = "", filename: str = "",
                   start_line: int = 0) -> int:
        """
        Intern a function and return its ID.

        Args:
            name: Display name
            system_name: Raw name
            filename: Source file name
            start_line: First line of the function

        Returns:
            ID of the existing or newly created Function
        """
        key = (name, system_name, filename, start_line)
        function_id = self.m_function_ids.get(key)
        if function_id is not None:
            return function_id

        function_id = len(self.m_functions) + 1
        self.m_functions.append(
            Function(function_id, name, filename, system_name, start_line))
        self.m_function_ids[key] = function_id
        return function_id

    def getFunctions(self) -> List[Function]:
        """Get the function table."""
        return self.m_functions

    def getFunction(self, function_id: int) -> Optional[Function]:
        """Get a function by ID, or None if the ID is not allocated."""
        if 1 <= function_id <= len(self.m_functions):
            return self.m_functions[function_id - 1]
        return None

    def getFunctionName(self, location_id: int) -> Optional[str]:
        """
        Get the name of the function of a location's first line.

        Args:
            location_id: ID of the location

        Returns:
            Function name, or None if the location or its line is missing
        """
        location = self.getLocation(location_id)
        if location is None or not location.getLines():
            return None
        function = self.getFunction(location.getLines()[0].getFunctionId())
        return function.getName() if function is not None else None

    def toDict(self) -> Dict[str, Any]:
        """
        Render the profile as plain Python containers.

        The layout follows the field names of the pprof schema, with names
        inlined instead of string-table indices.

        Returns:
            Dictionary with sample_type, period_type, period, sample,
            location and function entries
        """
        return {
            "sample_type": [
                {"type": st.getType(), "unit": st.getUnit()}
                for st in self.m_sample_type
            ],
            "period_type": {
                "type": self.m_period_type.getType(),
                "unit": self.m_period_type.getUnit(),
            },
            "period": self.m_period,
            "sample": [
                {
                    "location_id": list(sample.getLocationIds()),
                    "value": list(sample.getValues()),
                }
                for sample in self.m_samples
            ],
            "location": [
                {
                    "id": location.getId(),
                    "line": [
                        {"function_id": line.getFunctionId(), "line": line.getLine()}
                        for line in location.getLines()
                    ],
                    "address": location.getAddress(),
                }
                for location in self.m_locations
            ],
            "function": [
                {
                    "id": function.getId(),
                    "name": function.getName(),
                    "system_name": function.getSystemName(),
                    "filename": function.getFilename(),
                    "start_line": function.getStartLine(),
                }
                for function in self.m_functions
            ],
        }
