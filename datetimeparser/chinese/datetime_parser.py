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

from datetime import datetime

from ..core.combinators import ParseError, parse_all_of, parse_any_of
from ..core.logger import get_logger
from ..core.time_utils import DateTimeFields, to_datetime
from .rules import ClockTimeRule, DateRule, DurationRule


class DateTimeParser:
    """将中文时间表达式解析为绝对时间"""

    def __init__(self, base_time: datetime):
        """
        初始化解析器

        Args:
            base_time: 基准时间，所有相对表达式都相对它计算；带时区时结果沿用该时区
        """
        if not isinstance(base_time, datetime):
            raise TypeError(f"base_time must be a datetime, got {type(base_time).__name__}")
        self.logger = get_logger(__name__)
        self._base_time = base_time

        self.duration_rule = DurationRule(base_time)
        self.date_rule = DateRule(base_time)
        self.clock_rule = ClockTimeRule(base_time)

        self._datetime_rule = parse_any_of(
            [
                self.duration_rule,
                parse_all_of([self.date_rule, self.clock_rule]),
                self.clock_rule,
            ]
        )

    @property
    def base_time(self) -> datetime:
        return self._base_time

    def parse_datetime(self, text: str) -> datetime:
        """
        解析日期和时刻，如“明天上午8点”“两小时三分钟后”“15点14分”

        省略日期时使用基准日期。

        Raises:
            ParseError: 表达式无法识别
        """
        return self._parse(text, self._datetime_rule)

    def parse_date(self, text: str) -> datetime:
        """
        只解析日期，如“昨天”“上周日”，时分秒为 0

        Raises:
            ParseError: 表达式无法识别
        """
        return self._parse(text, self.date_rule)

    def _parse(self, text, rule):
        result = DateTimeFields.from_date(self._base_time)
        try:
            rule(text, result)
        except ParseError:
            self.logger.debug(f"无法识别的时间表达式: {text}")
            raise
        try:
            parsed = to_datetime(result, self._base_time.tzinfo)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"时间超出范围: {text}, {result}")
            raise ParseError(f"datetime out of range: {e}") from e
        self.logger.debug(f"Query: {text} -> {parsed.isoformat()}")
        return parsed
