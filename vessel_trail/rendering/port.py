"""
Rendering port for the trail map.
The map engine is an external collaborator; only this contract is consumed.

``features_at`` feeds ``TooltipProvider``. Inside Streamlit the pointer never
reaches Python, so deck.gl shows the same fields through the HTML template
from ``build_tooltip``; the provider defines what that template must match.
"""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, Union

from vessel_trail.trail.geometry import LineFeature, PointFeature, TrailFeatureCollection, ViewportDirective


@dataclass(frozen=True)
class RenderContext:
    """Presentation settings passed explicitly to the renderer."""
    map_style: str = "light"
    width: int = 900
    height: int = 560


class RenderingPort(Protocol):
    def render(
        self,
        collection: TrailFeatureCollection,
        viewport: ViewportDirective,
        context: RenderContext,
    ) -> Any:
        """Draw the collection and apply the viewport directive."""
        ...

    def features_at(self, x: float, y: float) -> Sequence[Union[PointFeature, LineFeature]]:
        """Features under a screen pixel of the last rendered map."""
        ...
