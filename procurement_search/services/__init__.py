"""Services package — all business logic lives here, never in routers.

Files:
  filter_compiler.py  — search filter → parameterized SQL (no I/O)
  records.py          — page fetch with over-fetch-by-one end detection
  serializer.py       — record → DTO conversion with one batched buyer lookup per page
  buyers.py           — buyer listing

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
