"""Shared helpers for lexicache."""
