"""
Scatter plot of active vs. passive sentence embeddings.
Uses Plotly; the pair connector is drawn as a layout shape.
"""

from typing import Optional

import plotly.graph_objects as go

from voice_map.core.series import Series, SeriesPair
from voice_map.visualization.overlay import Connector, HoverState, SentenceConnectorOverlay
from voice_map.visualization.tooltip import format_tooltip
import config


class ScatterPlotBuilder:
    """
    Builds the Plotly scatter chart for a series pair.

    Features:
    - One trace per series, colored per point
    - Multi-line word-window tooltips
    - Dashed connector between the two phrasings of the selected pair
    - Legend on top
    """

    MARKER_SIZE = 10
    MARKER_LINE_WIDTH = 2

    def __init__(
        self,
        height: int = config.PLOT_HEIGHT,
        font_size: int = config.FONT_SIZE,
        font_family: str = config.FONT_FAMILY
    ):
        """
        Initialize the scatter plot builder.

        Args:
            height: Plot height in pixels
            font_size: Base font size
            font_family: CSS font family
        """
        self.height = height
        self.font_size = font_size
        self.font_family = font_family

    def build(self, pair: SeriesPair, connector: Optional[Connector] = None) -> go.Figure:
        """
        Build the scatter plot.

        Args:
            pair: Active and passive series
            connector: Optional connector to draw between a selected pair

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()

        for series in (pair.active, pair.passive):
            fig.add_trace(self._build_trace(series))

        if connector is not None:
            self._add_connector(fig, connector)

        fig.update_layout(
            height=self.height,
            font=dict(size=self.font_size, family=self.font_family),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="bottom",
                y=1.02,
                xanchor="center",
                x=0.5,
            ),
            margin=dict(l=20, r=20, t=60, b=20),
            hovermode="closest",
            clickmode="event+select",
            dragmode="pan",
        )

        return fig

    def render(
        self,
        pair: SeriesPair,
        overlay: SentenceConnectorOverlay,
        state: HoverState
    ) -> go.Figure:
        """Build the chart with whatever the overlay draws for ``state``."""
        return self.build(pair, connector=overlay.draw(state, pair))

    def _build_trace(self, series: Series) -> go.Scatter:
        """Build one marker trace with per-point colors and tooltips."""
        return go.Scatter(
            x=series.xs,
            y=series.ys,
            mode="markers",
            marker=dict(
                color=series.fill_colors,
                size=self.MARKER_SIZE,
                line=dict(color=series.border_colors, width=self.MARKER_LINE_WIDTH),
            ),
            text=[format_tooltip(label) for label in series.labels],
            hovertemplate="%{text}<extra></extra>",
            name=series.name,
        )

    def _add_connector(self, fig: go.Figure, connector: Connector) -> None:
        """Draw the connector under the markers."""
        fig.add_shape(
            type="line",
            x0=connector.x0,
            y0=connector.y0,
            x1=connector.x1,
            y1=connector.y1,
            xref="x",
            yref="y",
            layer="below",
            line=dict(
                color=connector.style.color,
                width=connector.style.width,
                dash=connector.style.plotly_dash,
            ),
        )
