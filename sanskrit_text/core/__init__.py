"""
Core modules for the Sanskrit text layer.

Contains:
- models: Value types (Script, Phoneme, ValidationResult, ...)
- errors: Custom exceptions
"""
from . import models
from . import errors

__all__ = ['models', 'errors']
