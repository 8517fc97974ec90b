"""
Collabnotes Backend - Collaborative Note Taking API

Users register, log in with bearer tokens and share notes with collaborators.

Version: 1.0.0
"""

__version__ = "1.0.0"
