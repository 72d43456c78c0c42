"""Configuration: section models, unified settings, and logging setup."""
