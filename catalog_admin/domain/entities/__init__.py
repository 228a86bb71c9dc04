from .list_screen_state import ListScreenState, clamp_page

__all__ = [
    "ListScreenState",
    "clamp_page",
]
