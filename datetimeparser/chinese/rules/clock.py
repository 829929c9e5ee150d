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

from ...core.chinese_number_converter import (
    parse_any_minute,
    parse_number_with_unit,
    parse_numeric_number,
)
from ...core.combinators import literal, parse_all_of, parse_any_of, parse_regex
from .base_rule import BaseRule

AM_MARKERS = "(上午|凌晨|早上)"
PM_MARKERS = "(下午|晚上)"
HOUR_UNIT = "(点|时)"
COLON = "(:|：)"


class ClockTimeRule(BaseRule):
    """
    钟点规则

    处理一天之内的具体时刻，如：
    - 15:14
    - 3点14分、3点14、三点半、十点一刻
    - 8点
    - 上午8点、下午3点半、晚上11点

    下午/晚上 后小于 12 的小时加 12，已经是 24 小时制的不再调整。
    """

    def build(self):
        self.clock_time = parse_any_of(
            [
                self.parse_colon_time,
                self.parse_hour_minute,
                self.parse_hour,
            ]
        )
        self.am_time = parse_all_of([literal(AM_MARKERS), self.clock_time])
        self.pm_time = parse_all_of([literal(PM_MARKERS), self.clock_time])
        return parse_any_of(
            [
                self.am_time,
                self.parse_pm_time,
                self.clock_time,
            ]
        )

    def parse_colon_time(self, text, result):
        """15:14，秒保持记录中原有的值"""
        rest, hour = parse_numeric_number(text)
        rest = parse_regex(rest, COLON)
        rest, minute = parse_numeric_number(rest)
        result.hour = hour
        result.minute = minute
        return rest

    def parse_hour_minute(self, text, result):
        rest, hour = parse_number_with_unit(text, HOUR_UNIT)
        rest, minute = parse_any_minute(rest)
        result.hour = hour
        result.minute = minute
        return rest

    def parse_hour(self, text, result):
        rest, result.hour = parse_number_with_unit(text, HOUR_UNIT)
        result.minute = 0
        return rest

    def parse_pm_time(self, text, result):
        rest = self.pm_time(text, result)
        if result.hour < 12:
            result.hour += 12
        return rest
