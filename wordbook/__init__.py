"""wordbook - personal English/Chinese vocabulary manager with a self-quiz engine."""

__version__ = "0.1.0"
