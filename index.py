"""
FastAPI application for Vercel
Vercel auto-detects and deploys FastAPI apps at index.py
"""
import sys
import os

# Add project root to path so we can import from api/ and lib/
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from api.index import app, handler  # noqa: E402

__all__ = ["app", "handler"]
