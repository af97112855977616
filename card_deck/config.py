"""
牌组配置.

DeckConfig 以声明式方式描述一条变换管道，供命令行和调用方复用；
LoggingConfig 负责日志格式和级别.
"""

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional

from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core import (
    Card, Deck, Rank, Suit, Transform,
    build, filter_cards, jokers, less, make_shuffle, multiply,
    rank_less, reverse, sort_cards, suit_less,
)

logger = logging.getLogger(__name__)

SortOrder = Literal["default", "rank", "suit"]

_LESS_FACTORIES = {
    "default": less,
    "rank": rank_less,
    "suit": suit_less,
}


@pydantic_dataclass
class DeckConfig:
    """牌组管道配置.

    变换按固定顺序组装：移除点数/花色 -> 添加王牌 -> 复制 -> 排序 -> 洗牌.
    移除规则只作用于标准牌，王牌在移除之后才加入.
    """
    decks: int = Field(1, ge=0, description="牌组份数")
    jokers: int = Field(0, ge=0, description="王牌数量")
    remove_ranks: List[Rank] = Field(default_factory=list, description="移除的点数")
    remove_suits: List[Suit] = Field(default_factory=list, description="移除的花色")
    sort: Optional[SortOrder] = Field(None, description="排序方式")
    descending: bool = Field(False, description="是否降序")
    shuffle: bool = Field(False, description="是否洗牌")
    seed: Optional[int] = Field(None, description="洗牌随机种子")

    @model_validator(mode='after')
    def validate_sort_options(self) -> 'DeckConfig':
        """降序必须配合排序方式使用."""
        if self.descending and self.sort is None:
            raise ValueError("descending 需要同时指定 sort")
        if Suit.JOKER in self.remove_suits:
            raise ValueError("移除王牌请将 jokers 设为 0")
        return self

    def transforms(self) -> List[Transform]:
        """
        生成变换管道.

        Returns:
            List[Transform]: 按固定顺序排列的变换
        """
        pipeline: List[Transform] = []

        if self.remove_ranks or self.remove_suits:
            ranks = frozenset(self.remove_ranks)
            suits = frozenset(self.remove_suits)

            def removed(card: Card) -> bool:
                return not card.is_joker and (card.rank in ranks or card.suit in suits)

            pipeline.append(filter_cards(removed))

        if self.jokers:
            pipeline.append(jokers(self.jokers))
        if self.decks != 1:
            pipeline.append(multiply(self.decks))

        if self.sort is not None:
            factory = _LESS_FACTORIES[self.sort]
            if self.descending:
                factory = reverse(factory)
            pipeline.append(sort_cards(factory))

        if self.shuffle:
            pipeline.append(make_shuffle(seed=self.seed))

        return pipeline

    def build(self) -> Deck:
        """按配置构建牌组."""
        pipeline = self.transforms()
        logger.debug(f"按配置构建牌组: {self}")
        return build(*pipeline)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    应用日志配置.

    Args:
        config: 日志配置，默认使用LoggingConfig()

    Raises:
        ValueError: 当日志级别无法识别时
    """
    config = config or LoggingConfig()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"无效的日志级别: {config.log_level}")
    logging.basicConfig(level=level, format=config.log_format, force=True)
