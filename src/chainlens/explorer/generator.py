# File: src/chainlens/explorer/generator.py
from datetime import datetime, timedelta
from typing import Callable, Optional

from .models import AddressProfile, Block, Transaction
from ..utils.config import Config
from ..utils.random_source import RandomSource, utc_now


class MockChainGenerator:
    """Synthesizes blocks, transactions and address profiles.

    Nothing is remembered between calls: asking twice for the same block
    number yields two unrelated blocks.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.rng = rng or RandomSource()
        self.clock = clock

    def _hash(self) -> str:
        return self.rng.hex_value(Config.HASH_HEX_LENGTH)

    def _address(self) -> str:
        return self.rng.hex_value(Config.ADDRESS_HEX_LENGTH)

    def block(self, number: int) -> Block:
        """Generate a block; its age follows the fixed block time behind the anchor."""
        rng = self.rng
        return Block(
            number=number,
            hash=self._hash(),
            timestamp=self._block_time(number),
            transaction_count=rng.span(50, 300),
            miner=self._address(),
            gas_used=rng.span(20_000_000, 10_000_000),
            gas_limit=Config.GAS_LIMIT,
            size=rng.span(50_000, 100_000),
            difficulty=Config.BLOCK_DIFFICULTY,
            total_difficulty=Config.TOTAL_DIFFICULTY,
            reward=rng.uniform(Config.BASE_BLOCK_REWARD, Config.BLOCK_REWARD_SPREAD),
            parent_hash=self._hash(),
            nonce=rng.hex_value(Config.NONCE_HEX_LENGTH),
            mix_hash=self._hash(),
            receipts_root=self._hash(),
            state_root=self._hash(),
            transactions_root=self._hash(),
        )

    def _block_time(self, number: int) -> Optional[datetime]:
        """None when the block lies too far from the anchor to have a datetime"""
        age = (Config.ANCHOR_BLOCK_NUMBER - number) * Config.BLOCK_TIME
        try:
            return self.clock() - timedelta(seconds=age)
        except OverflowError:
            return None

    def transaction(self, block_number: int) -> Transaction:
        rng = self.rng
        status = 'success' if rng.random() > Config.FAILURE_THRESHOLD else 'failed'
        age = rng.random() * Config.MAX_TRANSACTION_AGE
        return Transaction(
            hash=self._hash(),
            from_address=self._address(),
            to_address=self._address(),
            value=rng.random() * 10,
            gas_price=rng.span(10_000_000_000, 50_000_000_000),
            gas_used=rng.span(21_000, 100_000),
            gas_limit=rng.span(21_000, 200_000),
            status=status,
            timestamp=self.clock() - timedelta(seconds=age),
            block_number=block_number,
            confirmations=rng.span(1, 10),
            type=rng.choice(Config.TRANSACTION_TYPES),
            nonce=rng.below(1000),
            input=self._calldata(),
        )

    def _calldata(self) -> str:
        if self.rng.random() > Config.EMPTY_INPUT_THRESHOLD:
            return '0x'
        size = self.rng.span(4, Config.MAX_INPUT_BYTES - 3)
        return self.rng.hex_value(size * 2)

    def address(self, address: str) -> AddressProfile:
        rng = self.rng
        now = self.clock()
        return AddressProfile(
            address=address,
            balance=rng.random() * 1000,
            transaction_count=rng.below(10_000),
            is_contract=rng.random() > Config.CONTRACT_THRESHOLD,
            first_seen=now - timedelta(seconds=rng.random() * Config.MAX_ADDRESS_AGE),
            last_activity=now - timedelta(seconds=rng.random() * Config.MAX_ADDRESS_IDLE),
        )
