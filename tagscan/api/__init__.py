"""
API layer for the asset tag scanner.

Exposes HTTP endpoints under /api/v1 (auth, ocr, live, manage/tags).
"""
