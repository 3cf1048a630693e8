# tests/test_explorer_service.py
import pytest
from datetime import datetime, timezone
from chainlens.exceptions import InvalidRequestError, ValidationError
from chainlens.explorer.generator import MockChainGenerator
from chainlens.explorer.service import BlockchainQueryService
from chainlens.utils.config import Config
from chainlens.utils.random_source import RandomSource

ANCHOR = Config.ANCHOR_BLOCK_NUMBER
NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


class FixedRandom(RandomSource):
    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


class TestBlockchainQueryService:
    @pytest.fixture
    def service(self):
        return BlockchainQueryService(MockChainGenerator(RandomSource(seed=42)))

    @pytest.fixture
    def fixed_service(self):
        return BlockchainQueryService(MockChainGenerator(FixedRandom(0.5), clock=lambda: NOW))

    def test_latest_blocks_descend_from_anchor(self, service):
        result = service.query({"type": "latest", "limit": "5"})

        assert [b.number for b in result.blocks] == [ANCHOR - i for i in range(5)]
        assert result.total_blocks == ANCHOR
        assert result.avg_block_time == 15.2

    def test_latest_is_default_type(self, service):
        assert len(service.query({}).blocks) == 10
        assert len(service.query({"type": ""}).blocks) == 10

    def test_limit_is_clamped(self, service):
        assert len(service.query({"type": "latest", "limit": "100"}).blocks) == 50
        assert len(service.query({"type": "transactions", "limit": "100"}).transactions) == 50

    def test_non_positive_limit_returns_nothing(self, service):
        assert service.query({"type": "latest", "limit": "0"}).blocks == []
        assert service.query({"type": "latest", "limit": "-3"}).blocks == []

    def test_malformed_limit(self, service):
        with pytest.raises(ValidationError):
            service.query({"type": "latest", "limit": "ten"})

    @pytest.mark.parametrize("limit", ["5.0", "+5", "5abc", " 5"])
    def test_limit_reads_leading_integer(self, service, limit):
        result = service.query({"type": "latest", "limit": limit})
        assert [b.number for b in result.blocks] == [ANCHOR - i for i in range(5)]

    def test_negative_leading_integer(self, service):
        assert service.query({"type": "latest", "limit": "-2.5"}).blocks == []

    def test_latest_transactions_share_blocks_in_tens(self, service):
        result = service.query({"type": "transactions", "limit": "25"})

        numbers = [tx.block_number for tx in result.transactions]
        assert numbers == [ANCHOR] * 10 + [ANCHOR - 1] * 10 + [ANCHOR - 2] * 5
        assert result.total_transactions == 2456789012

    def test_block_requires_number_or_hash(self, service):
        with pytest.raises(ValidationError) as exc:
            service.query({"type": "block"})
        assert exc.value.message == "Block number or hash required"
        assert exc.value.status_code == 400

    def test_block_detail_truncates_transactions(self, fixed_service):
        result = fixed_service.query({"type": "block", "block": "100"})

        assert result.block.number == 100
        assert result.block.transaction_count == 200
        assert result.total_transactions == 200
        assert len(result.transactions) == 20
        assert all(tx.block_number == 100 for tx in result.transactions)

    def test_block_by_hash_uses_anchor(self, service):
        result = service.query({"type": "block", "hash": "0xdeadbeef"})
        assert result.block.number == ANCHOR
        assert result.total_transactions == result.block.transaction_count
        assert len(result.transactions) == min(20, result.block.transaction_count)

    def test_block_number_must_be_integer(self, service):
        with pytest.raises(ValidationError):
            service.query({"type": "block", "block": "latest"})
        with pytest.raises(ValidationError):
            service.query({"type": "block", "block": "x100"})

    def test_block_number_with_suffix(self, service):
        assert service.query({"type": "block", "block": "100.7"}).block.number == 100

    def test_distant_block_number(self, service):
        detail = service.query({"type": "block", "block": "20000000000"})
        assert detail.block.number == 20000000000
        assert detail.block.timestamp is None

        result = service.query({"type": "search", "q": "20000000000"})
        assert result.type == "block"
        assert result.result.number == 20000000000

    def test_transaction_hash_is_caller_controlled(self, service):
        result = service.query({"type": "transaction", "hash": "0xabc"})
        assert result.transaction.hash == "0xabc"
        assert result.transaction.block_number == ANCHOR

    def test_transaction_requires_hash(self, service):
        with pytest.raises(ValidationError) as exc:
            service.query({"type": "transaction"})
        assert exc.value.message == "Transaction hash required"

    def test_stats_are_fixed(self, service):
        first = service.query({"type": "stats"})
        second = service.query({"type": "stats"})

        assert first == second
        assert first.latest_block == ANCHOR
        assert first.network_hash_rate == "485.2 TH/s"
        assert first.gas_price.slow == 18
        assert first.gas_price.instant == 50
        assert first.to_wire()["gasPrice"] == {"slow": 18, "standard": 25, "fast": 35, "instant": 50}

    def test_search_block_number(self, service):
        result = service.query({"type": "search", "q": "18750234"})
        assert result.type == "block"
        assert result.result.number == 18750234

    def test_search_transaction_hash(self, service):
        q = "0x" + "1" * 64
        result = service.query({"type": "search", "q": q})
        assert result.type == "transaction"
        assert result.result.hash == q

    def test_search_address(self, service):
        q = "0x" + "b" * 40
        result = service.query({"type": "search", "q": q})
        assert result.type == "address"
        assert result.result.address == q

    @pytest.mark.parametrize("q", ["hello", "0x123", "12ab", "0x" + "1" * 50])
    def test_search_unknown(self, service, q):
        result = service.query({"type": "search", "q": q})
        assert result.type == "unknown"
        assert result.result is None
        assert result.to_wire() == {"query": q, "type": "unknown", "result": None}

    def test_search_requires_query(self, service):
        with pytest.raises(ValidationError) as exc:
            service.query({"type": "search"})
        assert exc.value.message == "Search query required"

    @pytest.mark.parametrize("query_type", ["blocks", "LATEST", "overview", "nonsense"])
    def test_unknown_type(self, service, query_type):
        with pytest.raises(InvalidRequestError) as exc:
            service.query({"type": query_type})
        assert exc.value.status_code == 400

    def test_overview(self, service):
        overview = service.overview().to_wire()
        assert overview["blockHeight"] == ANCHOR
        assert overview["priceChange24h"] == 2.84
        assert overview["marketCap"] == 245890345678
