"""Core infrastructure: settings, logging, errors and the person store."""
