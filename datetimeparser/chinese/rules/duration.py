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

from ...core.chinese_number_converter import parse_number_with_unit
from ...core.combinators import ParseError, parse_any_of, parse_regex
from ...core.time_utils import add_duration
from .base_rule import BaseRule

LATER = "(以)?后"


class DurationRule(BaseRule):
    """
    时长偏移规则

    处理“多久以后”的表达式，如：
    - 半小时后、一个半小时后
    - 两小时三分钟后
    - 3小时以后、十分钟后

    只写入时分秒；日期保持为基准日期，即使相加后跨过了午夜。
    秒数始终继承基准时间的秒。
    """

    def build(self):
        return parse_any_of(
            [
                self.parse_half_hour_later,
                self.parse_hour_minute_later,
                self.parse_hour_later,
                self.parse_minute_later,
            ]
        )

    def _apply(self, result, hours=0, minutes=0):
        try:
            target = add_duration(self.base_time, hours=hours, minutes=minutes)
        except (ValueError, OverflowError) as e:
            raise ParseError(f"duration out of range: {e}") from e
        self.logger.debug(f"时长偏移: +{hours}h{minutes}m -> {target.isoformat()}")
        result.hour = target.hour
        result.minute = target.minute
        result.second = self.base_time.second

    def parse_half_hour_later(self, text, result):
        """N个半小时后 / 半(个)小时后"""
        try:
            rest, hours = parse_number_with_unit(text, "个半(小时|钟头)" + LATER)
        except ParseError:
            rest = parse_regex(text, "半(个)?(小时|钟头)" + LATER)
            hours = 0
        self._apply(result, hours=hours, minutes=30)
        return rest

    def parse_hour_later(self, text, result):
        rest, hours = parse_number_with_unit(text, "(个)?(小时|钟头)" + LATER)
        self._apply(result, hours=hours)
        return rest

    def parse_minute_later(self, text, result):
        rest, minutes = parse_number_with_unit(text, "(分钟|分)" + LATER)
        self._apply(result, minutes=minutes)
        return rest

    def parse_hour_minute_later(self, text, result):
        rest, hours = parse_number_with_unit(text, "(个)?(小时|时|钟头)")
        rest, minutes = parse_number_with_unit(rest, "(分钟|分)" + LATER)
        self._apply(result, hours=hours, minutes=minutes)
        return rest
