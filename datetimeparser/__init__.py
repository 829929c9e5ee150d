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
datetimeparser - 中文时间表达式解析库

把“明天上午8点”“两小时三分钟后”“下周日早上三点三刻”这类表达式
解析为相对基准时间的绝对时间点。

Classes:
    DateTimeParser: 绑定基准时间的解析器
    ParseError: 表达式无法识别

Usage:
    from datetime import datetime
    from datetimeparser import DateTimeParser

    parser = DateTimeParser(datetime(2022, 8, 12, 12, 34, 56))
    parser.parse_datetime("明天上午8点")
"""

from .chinese.datetime_parser import DateTimeParser
from .core.combinators import ParseError

__version__ = "1.0.0"

__all__ = [
    "DateTimeParser",
    "ParseError",
]
