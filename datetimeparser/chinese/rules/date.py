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

from typing import Tuple

from ...core.chinese_number_converter import parse_chinese_number, parse_number_with_unit
from ...core.combinators import ParseError, parse_all_of, parse_any_of, parse_regex
from ...core.time_utils import shift_date, weekday_index
from .base_rule import BaseRule

WEEK_PREFIX = "(周|星期|礼拜)"
SUNDAY = "(天|日)"


def parse_weekday(text: str) -> Tuple[str, int]:
    """
    解析星期：周日/星期天 -> 0，周一..周六 -> 1..6

    Raises:
        ParseError: 没有星期前缀，或数字不在 1-6
    """
    rest = parse_regex(text, WEEK_PREFIX)
    try:
        return parse_regex(rest, SUNDAY), 0
    except ParseError:
        pass
    try:
        rest, weekday = parse_chinese_number(rest)
    except ParseError:
        raise ParseError("weekday not parsed")
    if weekday < 1 or weekday > 6:
        raise ParseError("weekday not parsed")
    return rest, weekday


class DateRule(BaseRule):
    """
    日期规则

    处理相对和绝对日期表达式，如：
    - 今天、昨天、前天、明天、后天
    - 周一、上周日、下周三、下下周五
    - 这个月15号、上个月、下个月3号
    - 去年、明年1月13日
    - 2016年8月12日、8月12号
    """

    # 凌晨 5 点前说“明天”仍指当天
    DAY_BOUNDARY_HOUR = 5

    def build(self):
        return parse_any_of(
            [
                self.parse_today,
                self.parse_yesterday,
                self.parse_day_before_yesterday,
                self.parse_tomorrow,
                self.parse_day_after_tomorrow,
                self.parse_this_weekday,
                self.parse_last_weekday,
                self.parse_next_weekday,
                self.parse_week_after_next_weekday,
                parse_all_of([self.parse_this_month, self.parse_day]),
                self.parse_this_month,
                parse_all_of([self.parse_last_month, self.parse_day]),
                self.parse_last_month,
                parse_all_of([self.parse_next_month, self.parse_day]),
                self.parse_next_month,
                parse_all_of([self.parse_last_year, self.parse_month_day]),
                self.parse_last_year,
                parse_all_of([self.parse_next_year, self.parse_month_day]),
                self.parse_next_year,
                self.parse_year_month_day,
                self.parse_month_day,
            ]
        )

    def _shift(self, result, years=0, months=0, days=0):
        try:
            shifted = shift_date(self.base_time, years=years, months=months, days=days)
        except (ValueError, OverflowError) as e:
            raise ParseError(f"date out of range: {e}") from e
        result.set_date(*shifted)

    def _relative_day(self, text, result, pattern, days):
        rest = parse_regex(text, pattern)
        self._shift(result, days=days)
        return rest

    def _after_boundary(self, days):
        if self.base_time.hour < self.DAY_BOUNDARY_HOUR:
            return days - 1
        return days

    # 天

    def parse_today(self, text, result):
        return self._relative_day(text, result, "今(天|日)", 0)

    def parse_yesterday(self, text, result):
        return self._relative_day(text, result, "昨(天|日)", -1)

    def parse_day_before_yesterday(self, text, result):
        return self._relative_day(text, result, "前(天|日)", -2)

    def parse_tomorrow(self, text, result):
        return self._relative_day(text, result, "明(天|日)", self._after_boundary(1))

    def parse_day_after_tomorrow(self, text, result):
        return self._relative_day(text, result, "后(天|日)", self._after_boundary(2))

    # 星期

    def parse_this_weekday(self, text, result):
        """本周：周日在非周日说时指即将到来的周日；其余可能落在已经过去的日子"""
        rest, weekday = parse_weekday(text)
        current = weekday_index(self.base_time)
        if weekday == 0 and current != 0:
            weekday = 7
        self._shift(result, days=weekday - current)
        return rest

    def parse_last_weekday(self, text, result):
        rest = parse_regex(text, "上")
        rest, weekday = parse_weekday(rest)
        current = weekday_index(self.base_time)
        if weekday == 0 and current != 0:
            weekday = 7
        self._shift(result, days=-7 + (weekday - current))
        return rest

    def _next_week_offset(self, weekday):
        current = weekday_index(self.base_time)
        weekday += 7
        days = weekday - current
        # 基准是周日时，下周日至少相隔一整周
        if weekday == 7 and days < 7:
            days += 7
        return days

    def parse_next_weekday(self, text, result):
        rest = parse_regex(text, "下")
        rest, weekday = parse_weekday(rest)
        self._shift(result, days=self._next_week_offset(weekday))
        return rest

    def parse_week_after_next_weekday(self, text, result):
        rest = parse_regex(text, "下下")
        rest, weekday = parse_weekday(rest)
        self._shift(result, days=self._next_week_offset(weekday) + 7)
        return rest

    # 月

    def parse_this_month(self, text, result):
        rest = parse_regex(text, "(这(个)?|本)月")
        self._shift(result)
        return rest

    def parse_last_month(self, text, result):
        rest = parse_regex(text, "上个月")
        self._shift(result, months=-1)
        return rest

    def parse_next_month(self, text, result):
        rest = parse_regex(text, "下个月")
        self._shift(result, months=1)
        return rest

    # 年

    def parse_last_year(self, text, result):
        rest = parse_regex(text, "去年")
        self._shift(result, years=-1)
        return rest

    def parse_next_year(self, text, result):
        rest = parse_regex(text, "明年")
        self._shift(result, years=1)
        return rest

    # 绝对日期

    def parse_year(self, text, result):
        rest, result.year = parse_number_with_unit(text, "年")
        return rest

    def parse_month(self, text, result):
        rest, result.month = parse_number_with_unit(text, "月")
        return rest

    def parse_day(self, text, result):
        rest, result.day = parse_number_with_unit(text, "(日|号)")
        return rest

    def parse_year_month_day(self, text, result):
        return parse_all_of([self.parse_year, self.parse_month, self.parse_day])(text, result)

    def parse_month_day(self, text, result):
        return parse_all_of([self.parse_month, self.parse_day])(text, result)
