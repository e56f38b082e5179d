"""Core types, configuration and date handling."""
