"""Normalization helpers for raw RTTI payloads."""

from pyrtti.ingestion.normalize import safe_coordinate, safe_float, safe_str

__all__ = ["safe_coordinate", "safe_float", "safe_str"]
