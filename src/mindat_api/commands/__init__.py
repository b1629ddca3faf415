"""
The mindat_api.commands module exposes the Mindat client as a set of UI-facing commands.

Modules:
    - app_commands.py: MindatCommands, which holds the configured client and returns JSON-compatible values
    - geo.py: BoundingBox, the approximation used to filter localities around a coordinate
"""
from mindat_api.commands.geo import BoundingBox
from mindat_api.commands.app_commands import MindatCommands, to_json, NOT_CONFIGURED_MESSAGE, MISSING_LOCALITY_FILTER_MESSAGE

__all__ = ["BoundingBox", "MindatCommands", "to_json", "NOT_CONFIGURED_MESSAGE", "MISSING_LOCALITY_FILTER_MESSAGE"]
