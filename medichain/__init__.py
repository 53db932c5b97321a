"""
MediChain
=========

Medicine ledger chaincode: record management for medicines kept in the world
state of a permissioned ledger, with local world-state backends and a small
invocation runtime for development.
"""

from medichain.units.version import get_version, VERSION


__version__ = get_version(VERSION)

__author__ = "Nguyễn Lê Văn Dũng"

__all__ = []
