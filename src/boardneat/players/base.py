"""
Player Module

This module defines the decision interface through which a property-trading
board game consults its players, together with a fixed-policy player.

Classes:
    BuyDecision:  Outcome of landing on an unowned property
    JailDecision: How a jailed player tries to get out
    Decision:     Generic yes/no answer
    Player:       Player answering every decision with a fixed policy
"""

from enum   import Enum
from typing import Sequence

# Listed price of each of the 40 board squares (0 for squares that cannot be bought)
BOARD_PRICES = (  0,  60,   0,  60, 200, 200, 100,   0, 100, 120,
                  0, 140, 150, 140, 160, 200, 180,   0, 180, 200,
                  0, 220,   0, 220, 240, 200, 260, 260, 150, 280,
                  0, 300, 300,   0, 320, 200,   0, 250, 100, 400)

# Every player enters the game with this amount of money
STARTING_FUNDS = 1500

# Largest number of houses a player may ask to build or sell in one decision
MAX_HOUSES = 15

class BuyDecision(Enum):
    BUY     = "buy"
    AUCTION = "auction"

class JailDecision(Enum):
    ROLL = "roll"
    PAY  = "pay"
    CARD = "card"

class Decision(Enum):
    YES = "yes"
    NO  = "no"

class Player:
    """
    A player of the board game.

    The game engine calls the 'decide_*' methods whenever the player must
    choose. This class answers them with a simple fixed policy; subclasses
    override them to plug in their own strategy.

    Public Attributes:
        funds:  Money available to the player (negative while in debt)
        cards:  Number of get-out-of-jail cards held
        prices: Listed price of every board square

    Public Methods:
        decide_buy(index):          Buy the property at 'index' or send it to auction
        decide_jail():              Roll, pay or use a card to leave jail
        decide_mortgage(index):     Whether to mortgage the property at 'index'
        decide_advance(index):      Whether to lift the mortgage on the property at 'index'
        decide_auction_bid(index):  Bid for the property at 'index'
        decide_build_house(group):  Number of houses to build on a color group
        decide_sell_house(group):   Number of houses to sell from a color group
        decide_offer_trade():       Whether to propose a trade
        decide_accept_trade():      Whether to accept a proposed trade
    """

    def __init__(self, prices: Sequence[int] = BOARD_PRICES):
        self.funds : int           = STARTING_FUNDS
        self.cards : int           = 0
        self.prices: Sequence[int] = prices

    def decide_buy(self, index: int) -> BuyDecision:
        return BuyDecision.BUY

    def decide_jail(self) -> JailDecision:
        """
        Use a get-out-of-jail card when holding one, otherwise roll.
        """
        return JailDecision.CARD if self.cards > 0 else JailDecision.ROLL

    def decide_mortgage(self, index: int) -> Decision:
        """
        Mortgage only to get out of debt.
        """
        return Decision.YES if self.funds < 0 else Decision.NO

    def decide_advance(self, index: int) -> Decision:
        return Decision.YES

    def decide_auction_bid(self, index: int) -> int:
        """
        Bid the listed price of the property.
        """
        return self.prices[index]

    def decide_build_house(self, group: int) -> int:
        """
        Ask for as many houses as allowed; the game caps the request.
        """
        return MAX_HOUSES

    def decide_sell_house(self, group: int) -> int:
        """
        Sell everything while in debt, otherwise nothing.
        """
        return MAX_HOUSES if self.funds < 0 else 0

    def decide_offer_trade(self) -> Decision:
        return Decision.NO

    def decide_accept_trade(self) -> Decision:
        return Decision.NO

    def __repr__(self):
        return f"{type(self).__name__}(funds={self.funds}, cards={self.cards})"
