# box_filter/filtering/strategies/__init__.py

from .base import FilterStrategy
from .box_filter_border import BoxFilterBorderStrategy

__all__ = [
    "FilterStrategy",
    "BoxFilterBorderStrategy",
]
