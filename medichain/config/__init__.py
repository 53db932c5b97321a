"""
Configuration for MediChain.
"""

from medichain.config.settings import Settings, get_settings
from medichain.config.seed import DEFAULT_SEED_MEDICINES, SeedDataError, load_seed_medicines

__all__ = ['Settings', 'get_settings', 'DEFAULT_SEED_MEDICINES', 'SeedDataError', 'load_seed_medicines']
