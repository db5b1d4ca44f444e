"""
Test Fakes

In-memory implementations of the engine's ports.
"""

from tests.fakes.fake_oracle import FakeSymbolOracle

__all__ = ["FakeSymbolOracle"]
