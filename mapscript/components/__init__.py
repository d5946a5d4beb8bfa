"""Reusable building blocks used by the use-cases."""
