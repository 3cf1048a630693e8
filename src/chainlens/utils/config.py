# src/chainlens/utils/config.py


class Config:
    # Chain anchor: the synthetic "current" block height
    ANCHOR_BLOCK_NUMBER = 18750234
    BLOCK_TIME = 15  # seconds between synthetic blocks
    AVERAGE_BLOCK_TIME = 15.2
    TOTAL_TRANSACTIONS = 2456789012
    TOTAL_ADDRESSES = 245678901
    TRANSACTIONS_PER_BLOCK_GROUP = 10  # consecutive list entries sharing a block

    # Query limits
    DEFAULT_LIMIT = 10
    MAX_LIMIT = 50
    MAX_BLOCK_TRANSACTIONS = 20  # block detail response truncation
    DEFAULT_METRIC_HOURS = 24

    # Block generation
    GAS_LIMIT = 30_000_000
    BLOCK_DIFFICULTY = '58750234567890123456'
    TOTAL_DIFFICULTY = '587502345678901234567890'
    BASE_BLOCK_REWARD = 2.0
    BLOCK_REWARD_SPREAD = 0.5

    # Transaction generation
    TRANSACTION_TYPES = ('Transfer', 'Contract Call', 'DEX Swap', 'NFT Trade')
    FAILURE_THRESHOLD = 0.1  # draws at or below this fail
    EMPTY_INPUT_THRESHOLD = 0.5  # draws above this carry no calldata
    MAX_TRANSACTION_AGE = 3600  # 1 hour in seconds

    # Address profiles
    CONTRACT_THRESHOLD = 0.7  # draws above this mark an address as a contract
    MAX_ADDRESS_AGE = 31_536_000  # 1 year in seconds
    MAX_ADDRESS_IDLE = 86_400  # 1 day in seconds

    # Hex widths (characters after the 0x prefix)
    HASH_HEX_LENGTH = 64
    ADDRESS_HEX_LENGTH = 40
    NONCE_HEX_LENGTH = 16
    MAX_INPUT_BYTES = 100

    # Search classification lengths (including the 0x prefix)
    TX_HASH_LENGTH = 66
    ADDRESS_LENGTH = 42

    # Analytics
    METRIC_INTERVAL = 3600  # 1 hour in seconds
    ACTIVE_MODEL_WINDOW = 3600  # models refreshed within the last hour
    ALERT_IMPACTS = ('high', 'critical')
    DASHBOARD_TIMEFRAMES = ('1h', '24h', '7d', '30d')
    DEFAULT_DASHBOARD_TIMEFRAME = '24h'
