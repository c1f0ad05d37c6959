"""Presentation layers built on top of the emitter."""
