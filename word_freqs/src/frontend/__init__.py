"""Flask surface for the word frequency engine (see frontend.web)."""
