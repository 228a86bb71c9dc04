from .definitions import SCREENS, ScreenDefinition, get_screen
from .list_screen import EntityListScreen

__all__ = [
    "EntityListScreen",
    "SCREENS",
    "ScreenDefinition",
    "get_screen",
]
