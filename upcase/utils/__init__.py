"""Utility helpers package.

Holds the JSON response envelope and the endpoint directory shared by
the info route and the not-found handler.
"""
