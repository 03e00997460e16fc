"""Shared test fixtures for token-math."""

from dataclasses import dataclass
from typing import Any

import pytest

from token_math.config import ApySettings, FormatSettings, TokenMathSettings


@dataclass(frozen=True)
class MockToken:
    """Minimal Token implementation: identity is the address."""

    address: str
    decimals: int
    symbol: str = ""

    def equals(self, other: Any) -> bool:
        return isinstance(other, MockToken) and other.address == self.address


@pytest.fixture
def usdc() -> MockToken:
    """6-decimal stablecoin."""
    return MockToken(address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", decimals=6, symbol="USDC")


@pytest.fixture
def usdt() -> MockToken:
    """A different 6-decimal token (same scale, different identity)."""
    return MockToken(address="Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", decimals=6, symbol="USDT")


@pytest.fixture
def wei_token() -> MockToken:
    """18-decimal token, raw amounts routinely exceed u64."""
    return MockToken(address="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", decimals=18, symbol="WETH")


@pytest.fixture
def whole_token() -> MockToken:
    """0-decimal token."""
    return MockToken(address="whole", decimals=0, symbol="WHOLE")


@pytest.fixture
def mock_settings() -> TokenMathSettings:
    """Return settings with test defaults."""
    return TokenMathSettings(
        log_level="DEBUG",
        format=FormatSettings(locale="en_US"),
        apy=ApySettings(),
    )
