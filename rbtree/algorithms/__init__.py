"""
Tree algorithms operating directly on linked nodes.
"""
