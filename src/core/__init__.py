"""Core: domain, configuration, errors and the rewrite service."""
