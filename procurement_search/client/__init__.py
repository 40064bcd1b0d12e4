"""Client package — consumers of the HTTP API.

Files:
  api.py           — async httpx client for /records-search and /buyers
  buyer_index.py   — buyer name → ids index used to turn name filters into id filters
  session.py       — "load more" pagination state with stale-response discard
  presentation.py  — value formatting and stage labels for result rows

Rule: nothing here touches the database; everything goes through the API.
"""
