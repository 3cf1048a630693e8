# File: src/chainlens/explorer/service.py
import re
from typing import Callable, Dict, Mapping, Optional

from .generator import MockChainGenerator
from .models import (
    BlockDetail,
    ExplorerOverview,
    GasPriceTiers,
    LatestBlocks,
    LatestTransactions,
    NetworkStats,
    SearchResult,
    TransactionDetail,
    WireModel,
)
from .params import get_int, get_str, parse_int
from ..exceptions import InvalidRequestError, ValidationError
from ..utils.config import Config
from ..utils.logger import get_logger

logger = get_logger(__name__)

_BLOCK_NUMBER = re.compile(r'[0-9]+')

NETWORK_STATS = NetworkStats(
    latest_block=Config.ANCHOR_BLOCK_NUMBER,
    total_transactions=Config.TOTAL_TRANSACTIONS,
    total_addresses=Config.TOTAL_ADDRESSES,
    average_block_time=Config.AVERAGE_BLOCK_TIME,
    network_hash_rate='485.2 TH/s',
    difficulty='58.75 T',
    total_supply=120450678.45,
    circulating_supply=120450234.12,
    gas_price=GasPriceTiers(slow=18, standard=25, fast=35, instant=50),
    network_utilization=78.5,
)

EXPLORER_OVERVIEW = ExplorerOverview(
    block_height=Config.ANCHOR_BLOCK_NUMBER,
    hash_rate='485.2 TH/s',
    difficulty='58.75 T',
    network_fees=12.45,
    active_addresses=125634,
    total_supply=120450678,
    circulating_supply=120450234,
    market_cap=245890345678,
    price=2041.32,
    price_change_24h=2.84,
)


class BlockchainQueryService:
    """Answers explorer queries with synthetic chain data.

    ``query`` dispatches on the ``type`` parameter; every handler returns a
    wire model or raises an ``ExplorerError``.
    """

    name = 'blockchain'
    default_type = 'latest'
    internal_error_message = 'Failed to fetch blockchain data'
    extra_types = ('overview',)

    def __init__(self, generator: Optional[MockChainGenerator] = None):
        self.generator = generator or MockChainGenerator()
        self.handlers: Dict[str, Callable[[Mapping[str, str]], WireModel]] = {
            'latest': self.latest_blocks,
            'transactions': self.latest_transactions,
            'block': self.get_block,
            'transaction': self.get_transaction,
            'stats': self.get_stats,
            'search': self.search,
        }

    def query(self, params: Mapping[str, str]) -> WireModel:
        query_type = params.get('type') or self.default_type
        handler = self.handlers.get(query_type)
        if handler is None:
            raise InvalidRequestError('Invalid query type')
        logger.debug("Blockchain query type=%s", query_type)
        return handler(params)

    def _limit(self, params: Mapping[str, str]) -> int:
        return min(get_int(params, 'limit', Config.DEFAULT_LIMIT), Config.MAX_LIMIT)

    def latest_blocks(self, params: Mapping[str, str]) -> LatestBlocks:
        anchor = Config.ANCHOR_BLOCK_NUMBER
        blocks = [self.generator.block(anchor - i) for i in range(self._limit(params))]
        return LatestBlocks(
            blocks=blocks,
            total_blocks=anchor,
            avg_block_time=Config.AVERAGE_BLOCK_TIME,
        )

    def latest_transactions(self, params: Mapping[str, str]) -> LatestTransactions:
        group = Config.TRANSACTIONS_PER_BLOCK_GROUP
        transactions = [
            self.generator.transaction(Config.ANCHOR_BLOCK_NUMBER - i // group)
            for i in range(self._limit(params))
        ]
        return LatestTransactions(
            transactions=transactions,
            total_transactions=Config.TOTAL_TRANSACTIONS,
        )

    def get_block(self, params: Mapping[str, str]) -> BlockDetail:
        block_param = get_str(params, 'block')
        if block_param is None and get_str(params, 'hash') is None:
            raise ValidationError('Block number or hash required')

        # A hash alone cannot be resolved against synthetic data; fall back to the anchor
        number = parse_int(block_param, 'block') if block_param else Config.ANCHOR_BLOCK_NUMBER
        block = self.generator.block(number)
        transactions = [
            self.generator.transaction(number) for _ in range(block.transaction_count)
        ]
        return BlockDetail(
            block=block,
            transactions=transactions[:Config.MAX_BLOCK_TRANSACTIONS],
            total_transactions=block.transaction_count,
        )

    def get_transaction(self, params: Mapping[str, str]) -> TransactionDetail:
        tx_hash = get_str(params, 'hash')
        if tx_hash is None:
            raise ValidationError('Transaction hash required')

        transaction = self.generator.transaction(Config.ANCHOR_BLOCK_NUMBER)
        transaction.hash = tx_hash
        return TransactionDetail(transaction=transaction)

    def get_stats(self, params: Mapping[str, str]) -> NetworkStats:
        return NETWORK_STATS.model_copy(deep=True)

    def overview(self) -> ExplorerOverview:
        return EXPLORER_OVERVIEW.model_copy()

    def search(self, params: Mapping[str, str]) -> SearchResult:
        q = get_str(params, 'q')
        if q is None:
            raise ValidationError('Search query required')

        if _BLOCK_NUMBER.fullmatch(q):
            return SearchResult(query=q, type='block', result=self.generator.block(int(q)))
        if q.startswith('0x') and len(q) == Config.TX_HASH_LENGTH:
            transaction = self.generator.transaction(Config.ANCHOR_BLOCK_NUMBER)
            transaction.hash = q
            return SearchResult(query=q, type='transaction', result=transaction)
        if q.startswith('0x') and len(q) == Config.ADDRESS_LENGTH:
            return SearchResult(query=q, type='address', result=self.generator.address(q))
        return SearchResult(query=q, type='unknown', result=None)
