"""
MorphPhoto - organize pictures by date or extension and segregate corrupt images.
"""

__version__ = "1.0.0"
