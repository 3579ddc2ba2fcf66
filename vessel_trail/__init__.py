"""
Vessel Trail Dashboard.
Displays a vessel's historical track on a map, colored by a performance metric.
"""

__version__ = "0.1.0"
