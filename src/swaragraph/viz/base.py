from __future__ import annotations

"""Chart adapter protocol and registry."""

from pathlib import Path
from typing import Any, Dict, List, Protocol, runtime_checkable

from ..core.pipeline import Display


@runtime_checkable
class ChartAdapter(Protocol):
    """Protocol describing a chart adapter.

    Adapters draw a :class:`~swaragraph.core.pipeline.Display` and nothing
    else: filtering, unit conversion and tick placement are already done.
    """

    name: str

    def render(
        self,
        displays: Dict[str, Display],
        *,
        title: str = "",
        time_label: str = "Time (s)",
        save: str | Path | None = None,
        show: bool = False,
    ) -> Any:
        """Draw one panel per entry of *displays* (keyed by card title).

        Parameters
        ----------
        displays:
            Ordered mapping of panel title to derived display.
        title:
            Overall chart title.
        time_label:
            Label for the shared time axis.
        save:
            Optional output path understood by the adapter.
        show:
            Display the result interactively when supported.
        """


_registry: Dict[str, ChartAdapter] = {}


def register_chart(adapter: ChartAdapter) -> None:
    """Register ``adapter`` in the global registry."""
    validate_chart(adapter)
    _registry[adapter.name] = adapter


def get_chart(name: str) -> ChartAdapter:
    """Retrieve a chart adapter by ``name``."""
    try:
        return _registry[name]
    except KeyError:
        known = ", ".join(sorted(_registry)) or "none"
        raise KeyError(f"unknown chart adapter {name!r} (available: {known})") from None


def available_charts() -> List[str]:
    """Return the list of registered adapter names."""
    return list(_registry)


def validate_chart(adapter: ChartAdapter) -> None:
    """Validate that ``adapter`` satisfies the :class:`ChartAdapter` protocol."""
    if not isinstance(adapter, ChartAdapter):
        raise TypeError("Chart adapter does not implement the required protocol")
