"""Shared infrastructure: settings, logging, terminal contract, Redis storage."""
