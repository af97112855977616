"""牌组命令行界面.

按命令行选项构建牌组并逐行输出每张牌，主要用于查看变换效果和调试。
"""

import logging
from typing import List, Optional, Tuple

import click
from pydantic import ValidationError

from .config import DeckConfig, LoggingConfig, configure_logging
from .core import Rank, Suit

logger = logging.getLogger(__name__)

_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def _parse_ranks(names: Tuple[str, ...]) -> List[Rank]:
    ranks = []
    for name in names:
        try:
            ranks.append(Rank.from_name(name))
        except KeyError:
            raise click.BadParameter(f"无效的点数: {name}", param_hint="'--remove-rank'") from None
    return ranks


def _parse_suits(names: Tuple[str, ...]) -> List[Suit]:
    suits = []
    for name in names:
        try:
            suit = Suit.from_name(name)
        except KeyError:
            suit = None
        if suit is None or suit is Suit.JOKER:
            raise click.BadParameter(f"无效的花色: {name}", param_hint="'--remove-suit'")
        suits.append(suit)
    return suits


@click.command(name="card-deck")
@click.option("--decks", type=click.IntRange(min=0), default=1, show_default=True,
              help="牌组份数")
@click.option("--jokers", "joker_count", type=click.IntRange(min=0), default=0,
              show_default=True, help="追加的王牌数量")
@click.option("--remove-rank", multiple=True, metavar="RANK",
              help="移除指定点数的牌，可重复，如 --remove-rank ace")
@click.option("--remove-suit", multiple=True, metavar="SUIT",
              help="移除指定花色的牌，可重复，如 --remove-suit hearts")
@click.option("--sort", "sort_order", type=click.Choice(["default", "rank", "suit"]),
              default=None, help="排序方式")
@click.option("--descending", is_flag=True, help="降序排序（需配合 --sort）")
@click.option("--shuffle", "do_shuffle", is_flag=True, help="洗牌")
@click.option("--seed", type=int, default=None, help="洗牌随机种子")
@click.option("--count", "count_only", is_flag=True, help="只输出牌数")
@click.option("--log-level", type=click.Choice(_LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True, help="日志级别")
def main(decks: int, joker_count: int, remove_rank: Tuple[str, ...],
         remove_suit: Tuple[str, ...], sort_order: Optional[str], descending: bool,
         do_shuffle: bool, seed: Optional[int], count_only: bool, log_level: str) -> None:
    """构建一副扑克牌并逐行输出."""
    configure_logging(LoggingConfig(log_level=log_level))

    try:
        config = DeckConfig(
            decks=decks,
            jokers=joker_count,
            remove_ranks=_parse_ranks(remove_rank),
            remove_suits=_parse_suits(remove_suit),
            sort=sort_order,
            descending=descending,
            shuffle=do_shuffle,
            seed=seed,
        )
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise click.UsageError(messages) from None

    cards = config.build()
    logger.info(f"牌组构建完成: {len(cards)} 张")

    if count_only:
        click.echo(len(cards))
        return
    for card in cards:
        click.echo(str(card))


if __name__ == "__main__":
    main()
