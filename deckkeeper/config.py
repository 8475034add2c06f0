from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKKEEPER_")

    app_name: str = "DeckKeeper"
    debug: bool = False

    # Level used by the command-line jobs when configuring logging
    log_level: str = "INFO"


settings = Settings()


# =============================================================================
# DECK LIMITS
# =============================================================================

# A restored game holds exactly one standard deck
DECK_SIZE = 52

# Cards per suit and copies per rank in a standard deck
SUIT_SIZE = 13
RANK_COPIES = 4


# =============================================================================
# TABLEAU LIMITS
# =============================================================================

MAX_TABLEAU_STACKS = 7

# 0 + 1 + ... + 6: the most facedown cards a Klondike deal can leave
MAX_FACEDOWN_CARDS = 21


# =============================================================================
# CARD CODES
# =============================================================================

# Identities containing this marker are placeholders for unknown cards
WILDCARD_MARKER = "?"

# Foundations are always walked in this order, never in input order
FOUNDATION_ORDER = ("spades", "clubs", "hearts", "diamonds")
