"""
Bookshelf API - user authentication and book lookup backend.
"""
__version__ = "0.1.0"
