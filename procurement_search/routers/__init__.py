"""Routers package — HTTP endpoint definitions.

Files:
  records.py  — POST /records-search (filtered, paginated record search)
  buyers.py   — GET /buyers (full buyer list for the filter UI)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to procurement_search/services/.
"""
