"""Veto — multi-layer content moderation engine.

Inspects free-form user text and produces an approve/reject decision with
supporting evidence (flags, confidence, cleaned text).
"""

__version__ = "0.1.0"
