"""
Neural Player Module

A player whose decisions come from an evolved network.

Classes:
    NeuralPlayer: Player answering every decision with one forward pass
"""

import logging
from typing import Callable, Sequence

from boardneat.phenotype.network_base import NetworkBase
from boardneat.players.base           import (BOARD_PRICES, MAX_HOUSES, Player,
                                              BuyDecision, JailDecision, Decision)

logger = logging.getLogger(__name__)

class NeuralPlayer(Player):
    """
    A player driven by a compiled network.

    Each decision runs one forward pass on the game state produced by the
    encoder and reads a single output of the network:

        output | decision       | reading
        -------+----------------+--------------------------------------------
           0   | buy            | > 0.5 buys, otherwise auction
           1   | jail           | < 1/3 card, < 2/3 roll, otherwise pay
           2   | mortgage       | > 0.5 yes
           3   | advance        | > 0.5 yes
           4   | auction bid    | int(y * bid_scale)
           5   | build houses   | int(y * house_scale), 0 if y <= 0.5
           6   | sell houses    | int(y * house_scale), 0 if y <= 0.5
           7   | offer trade    | > 0.5 yes
           8   | accept trade   | > 0.5 yes

    The encoder is any callable returning the current game state as a
    sequence of as many values as the network has inputs; the network sees
    the game only through it.

    Since the network may be recurrent, every decision also updates the
    state the network carries into the next one.
    """

    NUM_DECISIONS = 9

    def __init__(self,
                 network    : NetworkBase,
                 encoder    : Callable[[], Sequence[float]],
                 bid_scale  : float = 4000.0,
                 house_scale: float = float(MAX_HOUSES),
                 prices     : Sequence[int] = BOARD_PRICES):
        """
        Parameters:
            network:     Compiled network with at least 9 outputs
            encoder:     Callable producing the network inputs from the game state
            bid_scale:   Money amount corresponding to an output of 1.0
            house_scale: Number of houses corresponding to an output of 1.0
            prices:      Listed price of every board square

        Raises:
            ValueError: if the network has fewer outputs than there are decisions
        """
        if network.number_outputs < self.NUM_DECISIONS:
            raise ValueError(f"A neural player needs a network with at least {self.NUM_DECISIONS} "
                             f"outputs, got {network.number_outputs}")
        super().__init__(prices)
        self.network     = network
        self.encoder     = encoder
        self.bid_scale   = bid_scale
        self.house_scale = house_scale

    def _output(self, slot: int) -> float:
        return self.network.propagate(self.encoder())[slot]

    def _houses(self, y: float) -> int:
        return int(y * self.house_scale) if y > 0.5 else 0

    def decide_buy(self, index: int) -> BuyDecision:
        return BuyDecision.BUY if self._output(0) > 0.5 else BuyDecision.AUCTION

    def decide_jail(self) -> JailDecision:
        y = self._output(1)
        if y < 1/3:
            return JailDecision.CARD
        elif y < 2/3:
            return JailDecision.ROLL
        return JailDecision.PAY

    def decide_mortgage(self, index: int) -> Decision:
        return Decision.YES if self._output(2) > 0.5 else Decision.NO

    def decide_advance(self, index: int) -> Decision:
        return Decision.YES if self._output(3) > 0.5 else Decision.NO

    def decide_auction_bid(self, index: int) -> int:
        bid = int(self._output(4) * self.bid_scale)
        logger.debug("bid %d for property %d", bid, index)
        return bid

    def decide_build_house(self, group: int) -> int:
        return self._houses(self._output(5))

    def decide_sell_house(self, group: int) -> int:
        return self._houses(self._output(6))

    def decide_offer_trade(self) -> Decision:
        return Decision.YES if self._output(7) > 0.5 else Decision.NO

    def decide_accept_trade(self) -> Decision:
        return Decision.YES if self._output(8) > 0.5 else Decision.NO
