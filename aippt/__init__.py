"""
AIPPT - AI Presentation Backend

Turns LLM-generated slide outlines into themed 16:9 PowerPoint decks.
"""

__version__ = "1.0.0"
__author__ = "AIPPT Team"
