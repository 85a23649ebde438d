"""
draft_service tests

Covers the Spirit11 draft service:

- account signup and login (`main.py`)
- player catalogue routes (`routes/players.py`)
- health probes (`routes/health.py`)
- database helpers, password hashing and auth event logging
"""
