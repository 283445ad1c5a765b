"""Utility functions for the DTO generator."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
