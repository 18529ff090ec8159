"""
Extends the plotted series with a live lookup for a user-supplied sentence pair.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

from voice_map.core.series import Point, SeriesPair
from voice_map.embedders.base import BaseEmbedder, EmbeddingServiceError, PairPosition
import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionOutcome:
    """Result of one live lookup: either positions or an error message."""
    active: str
    passive: str
    positions: Optional[PairPosition] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.positions is not None


def append_extension(
    pair: SeriesPair,
    positions: PairPosition,
    active: str,
    passive: str
) -> SeriesPair:
    """
    Append the looked-up sentences to both series at the same new index.

    Both points use the highlight colors so they stand apart from the
    precomputed dataset.
    """
    return pair.append(
        Point(
            x=positions.active.x,
            y=positions.active.y,
            label=active,
            border_color=config.EXTENSION_BORDER_COLOR,
            fill_color=config.EXTENSION_FILL_COLOR,
        ),
        Point(
            x=positions.passive.x,
            y=positions.passive.y,
            label=passive,
            border_color=config.EXTENSION_BORDER_COLOR,
            fill_color=config.EXTENSION_FILL_COLOR,
        ),
    )


class RemoteExtender:
    """
    Places a sentence pair via an embedder and appends it to the series.

    ``extend`` blocks until the lookup finishes. ``extend_async`` runs the
    lookup on a single background worker and hands the outcome to a
    continuation, so at most one request is in flight at a time.
    """

    def __init__(self, embedder: BaseEmbedder):
        self.embedder = embedder
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="voice-map-lookup")

    def extend(self, pair: SeriesPair, active: str, passive: str) -> SeriesPair:
        """
        Look up the pair and return the extended series.

        Raises:
            EmbeddingServiceError: If the lookup fails; ``pair`` is left as is
        """
        positions = self.embedder.locate(active, passive)
        return append_extension(pair, positions, active, passive)

    def lookup(self, active: str, passive: str) -> ExtensionOutcome:
        """Run the lookup and capture a failure in the outcome instead of raising."""
        try:
            positions = self.embedder.locate(active, passive)
        except EmbeddingServiceError as e:
            logger.exception("Embedding lookup failed")
            return ExtensionOutcome(active=active, passive=passive, error=str(e))
        return ExtensionOutcome(active=active, passive=passive, positions=positions)

    def lookup_async(
        self,
        active: str,
        passive: str,
        on_complete: Optional[Callable[[ExtensionOutcome], None]] = None
    ) -> "Future[ExtensionOutcome]":
        """Submit the lookup to the background worker."""
        future = self._executor.submit(self.lookup, active, passive)
        if on_complete is not None:
            future.add_done_callback(lambda f: on_complete(f.result()))
        return future

    def extend_async(
        self,
        pair: SeriesPair,
        active: str,
        passive: str,
        on_complete: Optional[Callable[[SeriesPair, ExtensionOutcome], None]] = None
    ) -> "Future[tuple[SeriesPair, ExtensionOutcome]]":
        """
        Non-blocking variant of ``extend``.

        The returned future resolves to ``(pair, outcome)`` and never raises:
        on failure the pair is the unchanged input and ``outcome.error`` is set.

        Args:
            pair: Series to extend
            active: Sentence in the active voice
            passive: Same sentence in the passive voice
            on_complete: Called with the resolved pair and outcome once the
                lookup finishes

        Returns:
            Future resolving to (pair, outcome)
        """
        result: "Future[tuple[SeriesPair, ExtensionOutcome]]" = Future()

        def _continue(lookup: "Future[ExtensionOutcome]") -> None:
            error = lookup.exception()
            if error is None:
                outcome = lookup.result()
            else:
                logger.error("Embedding lookup crashed", exc_info=error)
                outcome = ExtensionOutcome(active=active, passive=passive, error=str(error))
            extended = apply_outcome(pair, outcome)
            try:
                if on_complete is not None:
                    on_complete(extended, outcome)
            finally:
                result.set_result((extended, outcome))

        self.lookup_async(active, passive).add_done_callback(_continue)
        return result

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)


def apply_outcome(pair: SeriesPair, outcome: Optional[ExtensionOutcome]) -> SeriesPair:
    """Extend ``pair`` with a successful outcome; otherwise return it unchanged."""
    if outcome is None or not outcome.ok:
        return pair
    return append_extension(pair, outcome.positions, outcome.active, outcome.passive)
