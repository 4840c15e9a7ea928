"""Input, output and sport configuration models."""
