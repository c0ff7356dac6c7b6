"""
Infrastructure layer.

Adapters for the application ports (word storage, repository, quiz session
store), pydantic schemas and mappers, FastAPI routers and the dependency
injection container.
"""
