"""
Application layer.

Use cases orchestrating the domain, and the protocols (ports) that the
infrastructure layer implements:
- vocabulary: word storage/repository ports, import, export and search
- quiz: quiz session store port and the quiz use case
"""
