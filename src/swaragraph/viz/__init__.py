"""Chart adapters consuming :class:`~swaragraph.core.pipeline.Display` values."""

from importlib import import_module

from .base import ChartAdapter, available_charts, get_chart, register_chart

# Import chart modules to ensure registration
for _name in ["table", "matplotlib_chart"]:
    import_module(f".{_name}", __name__)

__all__ = [
    "ChartAdapter",
    "available_charts",
    "get_chart",
    "register_chart",
]
