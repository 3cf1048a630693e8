# src/chainlens/explorer/__init__.py
from .generator import MockChainGenerator
from .service import BlockchainQueryService

__all__ = ['MockChainGenerator', 'BlockchainQueryService']
