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

import pytest
from dateutil import tz

from datetimeparser.chinese.rules import DateRule, parse_weekday
from datetimeparser.core.combinators import ParseError
from datetimeparser.core.time_utils import DateTimeFields

SHANGHAI = tz.gettz("Asia/Shanghai")
# 2022-08-12 是周五
FRIDAY = datetime(2022, 8, 12, 12, 34, 56, tzinfo=SHANGHAI)
SATURDAY = datetime(2022, 8, 20, 12, 34, 56, tzinfo=SHANGHAI)
SUNDAY = datetime(2022, 8, 21, 12, 34, 56, tzinfo=SHANGHAI)


def resolve(base_time, text):
    result = DateTimeFields.from_date(base_time)
    rest = DateRule(base_time).parse(text, result)
    return (result.year, result.month, result.day), rest


@pytest.mark.parametrize(
    "text, expected",
    [
        ("周日", ("", 0)),
        ("星期天", ("", 0)),
        ("礼拜三", ("", 3)),
        ("周六下午", ("下午", 6)),
    ],
)
def test_parse_weekday(text, expected):
    assert parse_weekday(text) == expected


@pytest.mark.parametrize("text", ["周七", "周零", "三"])
def test_parse_weekday_rejects(text):
    with pytest.raises(ParseError):
        parse_weekday(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("今天", (2022, 8, 12)),
        ("昨日", (2022, 8, 11)),
        ("前天", (2022, 8, 10)),
        ("明天", (2022, 8, 13)),
        ("后天", (2022, 8, 14)),
    ],
)
def test_relative_days(text, expected):
    assert resolve(FRIDAY, text) == (expected, "")


def test_tomorrow_before_day_boundary():
    early = datetime(2022, 8, 12, 4, 59, tzinfo=SHANGHAI)
    assert resolve(early, "明天")[0] == (2022, 8, 12)
    assert resolve(early, "后天")[0] == (2022, 8, 13)
    five = datetime(2022, 8, 12, 5, 0, tzinfo=SHANGHAI)
    assert resolve(five, "明天")[0] == (2022, 8, 13)


def test_yesterday_crosses_month():
    assert resolve(datetime(2022, 8, 1, 12), "昨天")[0] == (2022, 7, 31)


@pytest.mark.parametrize(
    "base_time, text, expected",
    [
        (SATURDAY, "周一", (2022, 8, 15)),
        (SATURDAY, "周日", (2022, 8, 21)),
        (SUNDAY, "周日", (2022, 8, 21)),
        (FRIDAY, "星期二", (2022, 8, 9)),
        (SATURDAY, "上周日", (2022, 8, 14)),
        (SUNDAY, "上周日", (2022, 8, 14)),
        (FRIDAY, "上周一", (2022, 8, 1)),
        (SATURDAY, "下周一", (2022, 8, 22)),
        (FRIDAY, "下周日", (2022, 8, 21)),
        (SUNDAY, "下周日", (2022, 8, 28)),
        (FRIDAY, "下下周一", (2022, 8, 22)),
        (FRIDAY, "下下周日", (2022, 8, 28)),
    ],
)
def test_weekdays(base_time, text, expected):
    assert resolve(base_time, text)[0] == expected


@pytest.mark.parametrize(
    "base_time, text, expected",
    [
        (SATURDAY, "这个月31号", (2022, 8, 31)),
        (SATURDAY, "本月3日", (2022, 8, 3)),
        (SATURDAY, "上个月", (2022, 7, 20)),
        (SATURDAY, "上个月5号", (2022, 7, 5)),
        (SATURDAY, "下个月", (2022, 9, 20)),
        (datetime(2022, 8, 31), "下个月", (2022, 10, 1)),
        (datetime(2022, 12, 15), "下个月十二号", (2023, 1, 12)),
    ],
)
def test_months(base_time, text, expected):
    assert resolve(base_time, text)[0] == expected


def test_bare_this_month_keeps_reference_day():
    assert resolve(SATURDAY, "这个月") == ((2022, 8, 20), "")
    assert resolve(SATURDAY, "本月下午") == ((2022, 8, 20), "下午")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("去年", (2021, 8, 21)),
        ("去年1月13日", (2021, 1, 13)),
        ("明年", (2023, 8, 21)),
        ("明年十一月十二号", (2023, 11, 12)),
        ("2016年8月12日", (2016, 8, 12)),
        ("8月12号", (2022, 8, 12)),
        ("十二月一日", (2022, 12, 1)),
    ],
)
def test_years_and_absolute_dates(text, expected):
    assert resolve(SUNDAY, text) == (expected, "")


def test_leap_day_next_year_overflows():
    assert resolve(datetime(2024, 2, 29), "明年")[0] == (2025, 3, 1)


def test_failed_date_leaves_record_untouched():
    result = DateTimeFields.from_date(FRIDAY)
    with pytest.raises(ParseError):
        DateRule(FRIDAY).parse("2016年8月", result)
    assert result == DateTimeFields(2022, 8, 12)


@pytest.mark.parametrize(
    "base_time, text",
    [
        (datetime(9999, 12, 31, 12), "明天"),
        (datetime(9999, 12, 31, 12), "下个月"),
        (datetime(9999, 6, 1, 12), "明年"),
        (datetime(1, 1, 1, 12), "昨天"),
        (datetime(1, 6, 1, 12), "去年"),
    ],
)
def test_shift_beyond_calendar_range(base_time, text):
    result = DateTimeFields.from_date(base_time)
    with pytest.raises(ParseError):
        DateRule(base_time).parse(text, result)
    assert result == DateTimeFields.from_date(base_time)
