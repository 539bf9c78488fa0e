"""
HTTP layer
"""
