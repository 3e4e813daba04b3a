#!/usr/bin/env python3
"""
Development server runner for local testing
Run with: GEMINI_API_KEY=... python dev.py
Then try: curl "http://localhost:8000/api/verse?feeling=anxious"
"""
import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "index:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
