"""Core domain: models, schemas, repositories and services."""
