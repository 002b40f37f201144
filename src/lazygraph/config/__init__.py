"""Configuration: models, settings sources, file discovery, logging."""
