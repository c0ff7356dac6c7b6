"""
Domain layer.

Pure business logic with no framework or I/O dependencies:
- common: base classes and exceptions shared by every context
- vocabulary: word entries, bulk text parsing/export, deduplication
- quiz: quiz sessions and the session engine
"""
