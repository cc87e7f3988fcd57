"""Testing helpers for PyIterate (requires Hypothesis)."""
