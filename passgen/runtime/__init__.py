"""Generation engine and its concurrency and randomness helpers."""
