#!/usr/bin/env python3
"""
pagewright - Quick Start Script

Run this script to start the pagewright server.
"""
import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from pagewright.config import get_settings

    settings = get_settings()

    print("=" * 50)
    print("pagewright")
    print("=" * 50)
    print(f"Server starting at http://{settings.host}:{settings.port}")
    print(f"Sites: {settings.sites_path}")
    print("=" * 50)

    uvicorn.run(
        "pagewright.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
