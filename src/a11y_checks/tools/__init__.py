"""
Tools for obtaining elements from host platforms.
"""
