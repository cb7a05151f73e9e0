"""Endpoint helpers for the RTTI ``/buses`` query."""
