"""
CLI package for structify.
"""
