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
日期时间字段与日历运算

DateTimeFields 是每次解析使用的工作记录；字段允许越界（如 month=13、day=32），
在 to_datetime 时按公历进位归一化。
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Tuple

from dateutil import tz
from dateutil.relativedelta import relativedelta


@dataclass
class DateTimeFields:
    """年月日时分秒工作记录"""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_date(cls, base_time: datetime) -> "DateTimeFields":
        """取基准时间的年月日，时分秒置零"""
        return cls(base_time.year, base_time.month, base_time.day)

    def copy(self) -> "DateTimeFields":
        return replace(self)

    def update(self, other: "DateTimeFields"):
        """用另一条记录覆盖全部字段"""
        self.year = other.year
        self.month = other.month
        self.day = other.day
        self.hour = other.hour
        self.minute = other.minute
        self.second = other.second

    def set_date(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day


def to_datetime(fields: DateTimeFields, tzinfo=None) -> datetime:
    """
    将工作记录归一化为 datetime

    月份先按 12 进位到年，其余字段（日、时、分、秒）以偏移量的形式加到当月 1 日 0 点，
    因此 8 月 32 日会得到 9 月 1 日，25 点会进到次日 1 点。

    Raises:
        ValueError: 年份超出 datetime 支持的范围
        OverflowError: 偏移后超出 datetime 支持的范围
    """
    year_carry, month_index = divmod(fields.month - 1, 12)
    start = datetime(fields.year + year_carry, month_index + 1, 1, tzinfo=tzinfo)
    shifted = start + relativedelta(
        days=fields.day - 1,
        hours=fields.hour,
        minutes=fields.minute,
        seconds=fields.second,
    )
    # 落在夏令时跳变空档里的本地时间顺延到实际存在的时刻：02:30 -> 03:30
    return tz.resolve_imaginary(shifted)


def shift_date(base_time: datetime, years=0, months=0, days=0) -> Tuple[int, int, int]:
    """
    在基准时间的年月日上做偏移，返回归一化后的 (年, 月, 日)

    与 relativedelta 直接相加不同，月末溢出不会被截断到当月最后一天，
    而是进位到下个月：1 月 31 日加一个月得到 3 月 3 日（平年）。
    """
    shifted = to_datetime(
        DateTimeFields(base_time.year + years, base_time.month + months, base_time.day + days)
    )
    return shifted.year, shifted.month, shifted.day


def add_duration(base_time: datetime, hours=0, minutes=0) -> datetime:
    """
    在绝对时间轴上为基准时间加一段时长

    带时区的时间先换算到 UTC 相加再换回原时区，夏令时切换日也能得到正确的本地时刻；
    不带时区的时间按墙上时间直接相加。
    """
    delta = relativedelta(hours=hours, minutes=minutes)
    if base_time.tzinfo is None:
        return base_time + delta
    return (base_time.astimezone(timezone.utc) + delta).astimezone(base_time.tzinfo)


def weekday_index(base_time: datetime) -> int:
    """星期序号：0=周日, 1=周一 ... 6=周六"""
    return base_time.isoweekday() % 7
