"""
Golf Skins Analyzer - Core Package

This package contains the core modules for:
- Skins scoring (src.skins)
- Scorecard ingestion (src.ingestion)
- Shared configuration and utilities
"""

from src.config import *
