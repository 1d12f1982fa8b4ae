"""Core: dominio, contratos y servicios (sin I/O directo)."""
