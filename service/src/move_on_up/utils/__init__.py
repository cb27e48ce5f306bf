"""Utility helpers for Move On Up."""
