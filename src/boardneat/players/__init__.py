"""
Players Package

The decision interface between the board game and its players.

Modules:
    base:   Decision enumerations and the fixed-policy Player
    neural: NeuralPlayer, driven by a compiled network
"""

from boardneat.players.base   import (BOARD_PRICES, STARTING_FUNDS, MAX_HOUSES,
                                      BuyDecision, JailDecision, Decision, Player)
from boardneat.players.neural import NeuralPlayer

__all__ = ['BOARD_PRICES',
           'BuyDecision',
           'Decision',
           'JailDecision',
           'MAX_HOUSES',
           'NeuralPlayer',
           'Player',
           'STARTING_FUNDS']
