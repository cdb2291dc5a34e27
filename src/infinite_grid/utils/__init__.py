"""Utility helpers for infinite-grid."""
