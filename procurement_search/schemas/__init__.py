"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse + error body (all API schemas inherit CamelModel)
  record.py  — record search request and denormalized record DTOs
  buyer.py   — buyer DTOs
"""
