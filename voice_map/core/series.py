"""
Point series plotted for the active and passive phrasings.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Point:
    """A single plotted sentence."""
    x: float
    y: float
    label: str
    border_color: str
    fill_color: str


@dataclass(frozen=True)
class Series:
    """Ordered, immutable sequence of points sharing a legend entry."""
    name: str
    points: tuple[Point, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def append(self, point: Point) -> "Series":
        """Return a copy of this series with one more point at the end."""
        return replace(self, points=self.points + (point,))

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self.points]

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    @property
    def border_colors(self) -> list[str]:
        return [p.border_color for p in self.points]

    @property
    def fill_colors(self) -> list[str]:
        return [p.fill_color for p in self.points]


@dataclass(frozen=True)
class SeriesPair:
    """
    Active and passive series.

    Index i of both series always refers to the same sentence pair.
    """
    active: Series
    passive: Series

    def __post_init__(self):
        if len(self.active) != len(self.passive):
            raise ValueError(
                f"Series lengths differ: active={len(self.active)}, "
                f"passive={len(self.passive)}"
            )

    def __len__(self) -> int:
        return len(self.active)

    def append(self, active_point: Point, passive_point: Point) -> "SeriesPair":
        """Return a copy with one point appended to each series at the same index."""
        return SeriesPair(
            active=self.active.append(active_point),
            passive=self.passive.append(passive_point),
        )
