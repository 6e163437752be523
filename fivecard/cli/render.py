"""五张牌CLI渲染模块.

这个模块负责将评估结果渲染为命令行显示文本，
实现显示逻辑与核心评估逻辑的分离。
"""

from typing import List, Sequence

from fivecard.core.deck import Card, get_rank_name, get_suit_name
from fivecard.core.eval import HandResult, ShowdownOutcome


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据，返回字符串。
    """

    @staticmethod
    def render_card(card: Card) -> str:
        """渲染单张牌，如"Card: Rank Ace, Suit Hearts"."""
        return f"Card: Rank {get_rank_name(card.rank)}, Suit {get_suit_name(card.suit)}"

    @staticmethod
    def render_hand(cards: Sequence[Card]) -> str:
        """渲染一手牌，每张牌一行."""
        return "\n".join(CLIRenderer.render_card(card) for card in cards)

    @staticmethod
    def render_result(title: str, result: HandResult) -> str:
        """渲染一名玩家的评估结果.

        Args:
            title: 标题，如"Player 1"
            result: 评估结果

        Returns:
            格式化的多行字符串
        """
        lines = [
            f"{title}: {' '.join(str(card) for card in result.cards)}",
            CLIRenderer.render_hand(result.cards),
            f"Hand evaluation: {result}",
            f"Score: {result.score}",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_outcome(outcome: ShowdownOutcome) -> str:
        """渲染两手牌的比较结果."""
        if outcome == ShowdownOutcome.FIRST:
            return "Player 1 wins"
        elif outcome == ShowdownOutcome.SECOND:
            return "Player 2 wins"
        return "Tie"

    @staticmethod
    def render_winners(winners: List[int], results: List[HandResult]) -> str:
        """渲染多名玩家比牌的胜者.

        Args:
            winners: 获胜玩家的下标（从0开始）
            results: 所有玩家的评估结果

        Returns:
            胜者描述字符串
        """
        names = ", ".join(f"Player {index + 1}" for index in winners)
        best = results[winners[0]]
        if len(winners) > 1:
            return f"Tie between {names} with {best}"
        return f"{names} wins with {best}"
