"""Kernel models: schemas, statuses, revision records and their collaborators."""
