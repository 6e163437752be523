"""五张牌CLI入口.

提供两个命令：
- compare: 比较两手给定的牌
- deal: 用可重现的随机种子洗牌，给多名玩家各发5张牌后比牌
"""

import logging
import random
from typing import List, Optional

import click

from fivecard.core.config import (
    AppConfig, DealConfig, LoggingConfig, MAX_PLAYERS, MIN_PLAYERS, VALID_LOG_LEVELS, setup_logging
)
from fivecard.core.deck import Deck
from fivecard.core.eval import Hand, HandEvaluator, HandResult
from fivecard.core.exceptions import ConfigError, PokerHandError
from fivecard.cli.render import CLIRenderer


logger = logging.getLogger(__name__)


def _parse_hand(value: str, param_hint: str) -> Hand:
    """把命令行参数解析为Hand，格式错误时转为click参数错误."""
    try:
        return Hand.from_str(value)
    except PokerHandError as e:
        raise click.BadParameter(str(e), param_hint=param_hint) from e


def _find_winners(results: List[HandResult]) -> List[int]:
    best_score = max(result.score for result in results)
    return [index for index, result in enumerate(results) if result.score == best_score]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="日志级别",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """五张牌扑克手牌评估工具."""
    config = AppConfig(logging=LoggingConfig(log_level=log_level))
    setup_logging(config.logging)
    ctx.obj = config


@cli.command()
@click.argument("hand1")
@click.argument("hand2")
def compare(hand1: str, hand2: str) -> None:
    """比较两手牌，如: compare "AH KD QS JC 10H" "KH KD KS 10C 10H"."""
    first = _parse_hand(hand1, "HAND1")
    second = _parse_hand(hand2, "HAND2")

    evaluator = HandEvaluator()
    results = [evaluator.evaluate(first), evaluator.evaluate(second)]

    for index, result in enumerate(results):
        click.echo(CLIRenderer.render_result(f"Player {index + 1}", result))
        click.echo("-------------------")

    click.echo(CLIRenderer.render_outcome(evaluator.showdown(first, second)))


@cli.command()
@click.option("--seed", type=int, default=None, help="随机种子，给定后发牌可重现")
@click.option(
    "--players",
    type=click.IntRange(MIN_PLAYERS, MAX_PLAYERS),
    default=2,
    show_default=True,
    help="比牌人数",
)
@click.pass_context
def deal(ctx: click.Context, seed: Optional[int], players: int) -> None:
    """洗牌后给每名玩家发5张牌并比牌."""
    config: AppConfig = ctx.obj
    try:
        config.deal = DealConfig(random_seed=seed, players=players)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    deck = Deck(random.Random(config.deal.random_seed))
    deck.shuffle()
    logger.info(f"[发牌] 种子: {config.deal.random_seed}, 玩家数: {config.deal.players}")

    evaluator = HandEvaluator()
    results = []
    for index in range(config.deal.players):
        result = evaluator.evaluate(deck.deal_hand())
        results.append(result)
        click.echo(CLIRenderer.render_result(f"Player {index + 1}", result))
        click.echo("-------------------")

    click.echo(CLIRenderer.render_winners(_find_winners(results), results))


def main():
    """CLI主入口."""
    cli(prog_name="fivecard")


if __name__ == "__main__":
    main()
