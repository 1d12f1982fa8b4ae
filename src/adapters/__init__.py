"""Adaptadores de I/O (HTTP, volcado debug, exportación)."""
