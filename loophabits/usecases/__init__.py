"""Use-case layer: background tasks submitted by the habit list coordinator.

Each module coordinates domain objects and ports without touching the view
layer directly; results flow back through listener callbacks.
"""
