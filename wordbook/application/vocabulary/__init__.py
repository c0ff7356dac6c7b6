"""Vocabulary application module: ports and use cases for the word list."""
