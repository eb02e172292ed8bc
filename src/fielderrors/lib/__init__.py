"""Shared helpers: exceptions, logging, and placeholder substitution."""
