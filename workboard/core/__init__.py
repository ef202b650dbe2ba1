"""
Core utilities shared across the Workboard API.

Configuration, logging setup and the JSON error envelope live here so that
routers and services never read os.environ or build error bodies directly.
"""
