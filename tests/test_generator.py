# tests/test_generator.py
import pytest
from datetime import datetime, timedelta, timezone
from chainlens.explorer.generator import MockChainGenerator
from chainlens.utils.config import Config
from chainlens.utils.random_source import RandomSource

NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


class FixedRandom(RandomSource):
    """Every draw returns the same value"""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


class TestMockChainGenerator:
    @pytest.fixture
    def generator(self):
        return MockChainGenerator(FixedRandom(0.5), clock=lambda: NOW)

    def test_block_fields(self, generator):
        block = generator.block(Config.ANCHOR_BLOCK_NUMBER)

        assert block.number == Config.ANCHOR_BLOCK_NUMBER
        assert block.hash == "0x" + "8" * 64
        assert len(block.miner) == 42
        assert block.transaction_count == 200
        assert block.gas_used == 25_000_000
        assert block.gas_limit == 30_000_000
        assert block.size == 100_000
        assert block.reward == pytest.approx(2.25)
        assert block.difficulty == "58750234567890123456"
        assert block.total_difficulty == "587502345678901234567890"
        assert len(block.nonce) == 18
        for root in (block.parent_hash, block.mix_hash, block.receipts_root,
                     block.state_root, block.transactions_root):
            assert len(root) == 66
            assert root.startswith("0x")

    def test_block_timestamp_follows_block_time(self, generator):
        assert generator.block(Config.ANCHOR_BLOCK_NUMBER).timestamp == NOW
        older = generator.block(Config.ANCHOR_BLOCK_NUMBER - 4)
        assert older.timestamp == NOW - timedelta(seconds=60)

    def test_transaction_fields(self, generator):
        tx = generator.transaction(1234)

        assert tx.block_number == 1234
        assert tx.status == "success"
        assert tx.value == pytest.approx(5.0)
        assert tx.gas_price == 35_000_000_000
        assert tx.gas_used == 71_000
        assert tx.gas_limit == 121_000
        assert tx.confirmations == 6
        assert tx.type == "DEX Swap"
        assert tx.nonce == 500
        assert tx.timestamp == NOW - timedelta(seconds=1800)
        assert len(tx.from_address) == 42
        assert len(tx.to_address) == 42

    def test_transaction_calldata(self, generator):
        # 0.5 is not above the empty-input threshold, so calldata is generated
        assert generator.transaction(1).input == "0x" + "8" * 104

        empty = MockChainGenerator(FixedRandom(0.75), clock=lambda: NOW)
        assert empty.transaction(1).input == "0x"

    def test_low_draws_fail_transactions(self):
        generator = MockChainGenerator(FixedRandom(0.05), clock=lambda: NOW)
        assert generator.transaction(1).status == "failed"

    def test_hex_digit_bounds(self):
        low = MockChainGenerator(FixedRandom(0.0), clock=lambda: NOW)
        high = MockChainGenerator(FixedRandom(0.9999), clock=lambda: NOW)
        assert low.block(1).hash == "0x" + "0" * 64
        assert high.block(1).hash == "0x" + "f" * 64

    def test_address_profile(self):
        address = "0x" + "a" * 40
        contract = MockChainGenerator(FixedRandom(0.8), clock=lambda: NOW).address(address)
        assert contract.address == address
        assert contract.is_contract is True
        assert contract.transaction_count == 8000
        assert contract.first_seen == NOW - timedelta(seconds=0.8 * Config.MAX_ADDRESS_AGE)
        assert contract.last_activity == NOW - timedelta(seconds=0.8 * Config.MAX_ADDRESS_IDLE)

        wallet = MockChainGenerator(FixedRandom(0.5), clock=lambda: NOW).address(address)
        assert wallet.is_contract is False

    def test_repeated_calls_are_independent(self):
        generator = MockChainGenerator(RandomSource(seed=7))
        first = generator.block(100)
        second = generator.block(100)
        assert first.number == second.number
        assert first.hash != second.hash

    def test_wire_format(self, generator):
        block = generator.block(10).to_wire()
        assert block["transactions"] == 200
        assert "gasUsed" in block
        assert "transactionsRoot" in block
        assert isinstance(block["timestamp"], str)

        tx = generator.transaction(10).to_wire()
        assert "from" in tx and "to" in tx
        assert tx["blockNumber"] == 10

    def test_block_far_from_anchor_has_no_timestamp(self, generator):
        block = generator.block(20_000_000_000)

        assert block.number == 20_000_000_000
        assert block.timestamp is None
        assert block.to_wire()["timestamp"] is None
        assert generator.block(-20_000_000_000).timestamp is None
