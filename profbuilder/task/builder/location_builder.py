'''
module location builder
'''

from typing import Dict, Tuple
from ...perf_data_struct.profile_proto import Location, Profile

LocationKey = Tuple[str, str, str, int]

'''
@class LocationBuilder
Interns rendered frames into dense profile locations
'''


class LocationBuilder:
    """
    LocationBuilder maps rendered frame identities to profile locations.

    A rendered identity is the tuple (class name, display name, file name,
    line number). The first occurrence of a key allocates the next dense
    location ID in the profile, interns the backing function and attaches
    one line to the location. Later occurrences of the same key return the
    stored location unchanged, so a key maps to one ID for the lifetime of
    the builder, and distinct keys never share an ID.

    Attributes:
        m_profile: Profile the locations are appended to
        m_locations: Dictionary mapping location keys to locations
    """

    def __init__(self, profile: Profile) -> None:
        """
        Initialize a LocationBuilder.

        Args:
            profile: Profile that owns the location and function tables
        """
        self.m_profile: Profile = profile
        self.m_locations: Dict[LocationKey, Location] = {}

    def locationFor(self, class_name: str, function_name: str,
                    file_name: str, line_number: int) -> Location:
        """
        Get or create the location of a rendered frame.

        Args:
            class_name: Class name of the frame
            function_name: Display name of the frame
            file_name: Source file name
            line_number: Source line number

        Returns:
            The interned Location
        """
        key = (class_name, function_name, file_name, line_number)
        location = self.m_locations.get(key)
        if location is not None:
            return location

        location = self.m_profile.addLocation()
        self.m_locations[key] = location

        # TODO: carry the library (mapping) name once mappings are emitted.
        function_id = self.m_profile.functionId(function_name, "", file_name, 0)
        location.addLine(function_id, line_number)
        return location

    def getProfile(self) -> Profile:
        """Get the profile the locations belong to."""
        return self.m_profile

    def getLocationCount(self) -> int:
        """Get the number of interned locations."""
        return len(self.m_locations)
