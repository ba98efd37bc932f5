"""Syllable-by-syllable reading for early readers."""
