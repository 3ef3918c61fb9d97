"""State layer.

This package holds the observable application state and the pure
reducers that compute the next snapshot from a store response.
"""
