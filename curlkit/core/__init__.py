"""
Core Module.

Configuration loading, structured logging and the exception hierarchy
shared by the rest of the package.
"""
