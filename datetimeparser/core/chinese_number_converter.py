# Copyright (c) 2025 The datetimeparser Authors
# Licensed under the Apache License, Version 2.0

"""
数字与数量匹配器

与记录型规则不同，这里的匹配器返回 (剩余输入, 数值)，失败时抛出 ParseError。
"""

from typing import Tuple

from .combinators import ParseError, parse_regex

# 下标即数值，顺序不可调整
CHINESE_DIGITS = (
    "(〇|零)",
    "一",
    "(二|两)",
    "三",
    "四",
    "五",
    "六",
    "七",
    "八",
    "九",
    "十",
    "十一",
    "十二",
)


def parse_numeric_number(text: str) -> Tuple[str, int]:
    """贪婪匹配开头连续的阿拉伯数字：2016年 -> ("年", 2016)"""
    n = 0
    parsed = 0
    while parsed < len(text) and "0" <= text[parsed] <= "9":
        n = n * 10 + ord(text[parsed]) - ord("0")
        parsed += 1
    if parsed == 0:
        raise ParseError("number not parsed")
    return text[parsed:], n


def parse_chinese_number(text: str) -> Tuple[str, int]:
    """
    按 CHINESE_DIGITS 查表匹配中文数字（0-12）

    表中每一项都会尝试，取最后一个匹配的项，
    这样“十一”“十二”不会被前面的“十”截断。
    """
    matched = None
    for value, digit in enumerate(CHINESE_DIGITS):
        try:
            rest = parse_regex(text, digit)
        except ParseError:
            continue
        matched = (rest, value)
    if matched is None:
        raise ParseError("chinese number not parsed")
    return matched


def parse_any_number(text: str) -> Tuple[str, int]:
    """阿拉伯数字优先，其次中文数字"""
    for parse in (parse_numeric_number, parse_chinese_number):
        try:
            return parse(text)
        except ParseError:
            continue
    raise ParseError("not parsed any of")


def parse_number_with_unit(text: str, unit: str) -> Tuple[str, int]:
    """数字后紧跟单位（正则），单位可以是可选模式如 (分)?"""
    rest, n = parse_any_number(text)
    try:
        rest = parse_regex(rest, unit)
    except ParseError:
        raise ParseError(f"expecting unit {unit}")
    return rest, n


def parse_any_minute(text: str) -> Tuple[str, int]:
    """
    解析点钟之后的分钟部分

    - 半 -> 30
    - N刻 -> N*15
    - N分 / N -> N（分字可省略）
    """
    try:
        return parse_regex(text, "半"), 30
    except ParseError:
        pass
    try:
        rest, k = parse_number_with_unit(text, "刻")
        return rest, k * 15
    except ParseError:
        pass
    try:
        return parse_number_with_unit(text, "(分)?")
    except ParseError:
        raise ParseError("minute not parsed")
