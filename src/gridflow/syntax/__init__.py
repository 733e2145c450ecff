"""Input-boundary records produced by the parsers."""
