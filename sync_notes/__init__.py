"""
Sync Notes - single-use note slots with file-backed storage.
"""
