"""Configuration, logging, errors and store bootstrap."""
