"""Adapters that run canhas rules from an ORM's lifecycle hooks."""
