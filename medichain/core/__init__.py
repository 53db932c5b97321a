"""
Core value objects for MediChain.
"""

from medichain.core.medicine import Medicine, QueryResult, MEDICINE_FIELDS

__all__ = ['Medicine', 'QueryResult', 'MEDICINE_FIELDS']
