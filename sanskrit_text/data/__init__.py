"""
Data directory for Devanagari and IAST character tables.
"""
from sanskrit_text.data import script_mappings

__all__ = ['script_mappings']
