"""Habit list coordination core: domain, use-cases, adapters and app wiring."""

__version__ = "0.1.0"
