"""
牌组业务异常定义.

所有异常都继承自DeckError，参数类异常同时继承ValueError，
调用方可以按任意一层捕获.
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class InvalidCardError(DeckError, ValueError):
    """无效卡牌异常（花色或点数超出范围、字符串无法解析）"""
    pass


class InvalidCountError(DeckError, ValueError):
    """无效数量异常（王牌数量或牌组份数为负数）"""
    pass
