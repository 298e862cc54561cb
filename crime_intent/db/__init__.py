"""Persistence layer: ORM models, schemas, store functions and migrations."""
