"""Small worked programs: expressions, HTML tools, integer sets, disk usage and tiny servers."""

__version__ = "0.1.0"