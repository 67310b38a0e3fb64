# tests/__init__.py
"""
Test suite for borr.

Organization:
- grammar / extensions / version: pure helpers, no I/O.
- language / resolver: parsing and lookups on in-memory text.
- catalog / cli / config: filesystem and environment, via tmp_path and monkeypatch.
"""
