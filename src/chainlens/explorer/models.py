# File: src/chainlens/explorer/models.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import ClassVar, List, Literal, Optional, Union


class WireModel(BaseModel):
    """Snake-case attributes, camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    omit_none: ClassVar[bool] = False

    def to_wire(self) -> dict:
        return self.model_dump(mode='json', by_alias=True, exclude_none=self.omit_none)


class Block(WireModel):
    number: int
    hash: str
    timestamp: Optional[datetime]
    transaction_count: int = Field(alias='transactions')
    miner: str
    gas_used: int
    gas_limit: int
    size: int
    difficulty: str
    total_difficulty: str
    reward: float
    parent_hash: str
    nonce: str
    mix_hash: str
    receipts_root: str
    state_root: str
    transactions_root: str


class Transaction(WireModel):
    hash: str
    from_address: str = Field(alias='from')
    to_address: str = Field(alias='to')
    value: float
    gas_price: int
    gas_used: int
    gas_limit: int
    status: Literal['success', 'failed', 'pending']
    timestamp: datetime
    block_number: int
    confirmations: int
    type: str
    nonce: int
    input: str


class AddressProfile(WireModel):
    address: str
    balance: float
    transaction_count: int
    is_contract: bool
    first_seen: datetime
    last_activity: datetime


class GasPriceTiers(WireModel):
    slow: int
    standard: int
    fast: int
    instant: int


class NetworkStats(WireModel):
    latest_block: int
    total_transactions: int
    total_addresses: int
    average_block_time: float
    network_hash_rate: str
    difficulty: str
    total_supply: float
    circulating_supply: float
    gas_price: GasPriceTiers
    network_utilization: float


class ExplorerOverview(WireModel):
    block_height: int
    hash_rate: str
    difficulty: str
    network_fees: float
    active_addresses: int
    total_supply: float
    circulating_supply: float
    market_cap: float
    price: float
    price_change_24h: float = Field(alias='priceChange24h')


class LatestBlocks(WireModel):
    blocks: List[Block]
    total_blocks: int
    avg_block_time: float


class LatestTransactions(WireModel):
    transactions: List[Transaction]
    total_transactions: int


class BlockDetail(WireModel):
    block: Block
    transactions: List[Transaction]
    total_transactions: int


class TransactionDetail(WireModel):
    transaction: Transaction


class SearchResult(WireModel):
    query: str
    type: Literal['block', 'transaction', 'address', 'unknown']
    result: Optional[Union[Block, Transaction, AddressProfile]] = None
