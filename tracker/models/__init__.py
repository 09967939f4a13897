from tracker.models.page_view import PageView, RouteType
from tracker.models.visitor import Visitor
from tracker.models.vote import Vote

__all__ = [
    "PageView",
    "RouteType",
    "Visitor",
    "Vote",
]
