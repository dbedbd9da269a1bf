"""
Core utilities - errors, password hashing and logging.
"""
