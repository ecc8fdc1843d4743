"""
Asset tag scanner: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the extraction pipeline, live push channels and MongoDB persistence.
"""
