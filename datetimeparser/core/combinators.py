# Copyright (c) 2025 The datetimeparser Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
回溯式解析组合子

所有规则共用同一个约定：

    rule(text, result) -> rest

text 是尚未消费的剩余输入，result 是 DateTimeFields 工作记录；成功时返回新的剩余输入，
失败时抛出 ParseError。组合子只在整条规则成功时才把工作副本写回 result，
失败的分支不会在调用方留下任何修改。
"""

import re
from functools import lru_cache
from typing import Callable, Sequence

from .time_utils import DateTimeFields

Rule = Callable[[str, DateTimeFields], str]


class ParseError(ValueError):
    """时间表达式无法识别"""


@lru_cache(maxsize=None)
def _compile(pattern: str):
    return re.compile(pattern)


def parse_regex(text: str, pattern: str) -> str:
    """
    在剩余输入的开头匹配正则，返回匹配之后的剩余部分

    Args:
        text: 剩余输入
        pattern: 正则表达式，隐式锚定在开头

    Raises:
        ParseError: 开头不匹配
    """
    match = _compile(pattern).match(text)
    if match is None:
        raise ParseError(f"pattern {pattern!r} not matched")
    return text[match.end() :]


def literal(pattern: str) -> Rule:
    """只消费输入、不修改记录的规则"""

    def parse(text: str, result: DateTimeFields) -> str:
        return parse_regex(text, pattern)

    return parse


def parse_any_of(rules: Sequence[Rule]) -> Rule:
    """
    按顺序尝试各条规则，提交第一条成功的

    每条规则都从原始输入和调用方记录的新副本开始，顺序即优先级。
    """
    rules = tuple(rules)

    def parse(text: str, result: DateTimeFields) -> str:
        for rule in rules:
            working = result.copy()
            try:
                rest = rule(text, working)
            except ParseError:
                continue
            result.update(working)
            return rest
        raise ParseError("not parsed any of")

    return parse


def parse_all_of(rules: Sequence[Rule]) -> Rule:
    """
    依次执行全部规则，每条从上一条的剩余输入继续

    所有规则共享一个工作副本，任一失败则整体失败，副本被丢弃。
    """
    rules = tuple(rules)

    def parse(text: str, result: DateTimeFields) -> str:
        rest = text
        working = result.copy()
        for rule in rules:
            rest = rule(rest, working)
        result.update(working)
        return rest

    return parse
