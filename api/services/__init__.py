"""
Services package - Business logic layer for the API
All functional logic should be implemented here, separate from HTTP routing
"""
from api.services.verses import generate_verse

__all__ = ['generate_verse']
