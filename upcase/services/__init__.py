"""Service layer package housing the request-independent logic.

Contains the text transform and the upload filter. Routes call into
these and never touch case mapping or allow-lists directly.
"""
