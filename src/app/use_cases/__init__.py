"""Casos de uso por canal de origem."""
