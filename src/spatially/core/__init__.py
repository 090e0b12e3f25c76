"""
Core parsing, configuration, and error handling.
"""
