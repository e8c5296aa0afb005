"""Train search: pick the best trains between two stations from a static timetable."""

__version__ = "0.1.0"
