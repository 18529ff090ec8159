"""Voice-Map: active vs. passive sentence embedding explorer."""
