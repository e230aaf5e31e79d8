"""State layer.

The record store and the selection coordinator are the only components
that hold mutable application state.
"""
