from .version import VERSION, get_version, get_major_version

__all__ = ['VERSION', 'get_version', 'get_major_version']
