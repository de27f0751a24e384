"""Route blueprints package for API endpoints.

``uppercase`` holds the two conversion endpoints; ``meta`` holds the
usage directory and the health check.
"""
