"""
Utility modules for MorphPhoto.

- file_helpers: unique destination names, no-overwrite copy, hashing
- time_utils: filesystem timestamps and date folder names
"""
