"""Vocabulary infrastructure: repository, storage adapters, schemas, routers."""
