"""
Vercel serverless entry point for /api/employee-management/*.

Vercel's Python runtime imports this module and serves the ASGI
application exported as `app`; `handler` is kept as an alias for runtimes
that look for that name. Unhandled errors are turned into a JSON 500 by
the application's middleware.
"""
import sys
from pathlib import Path

# Ensure repo root is on sys.path for the serverless runtime
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.main import app

handler = app
