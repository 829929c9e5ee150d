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
时间解析核心模块

与具体语言无关的部分：回溯组合子、数字匹配器、工作记录与日历运算、日志。

主要组件:
- parse_any_of / parse_all_of: 有序选择与顺序组合
- DateTimeFields: 每次解析使用的年月日时分秒记录
- 日志: get_logger / setup_logging / auto_setup
"""

from .combinators import ParseError, parse_all_of, parse_any_of, parse_regex
from .time_utils import DateTimeFields, add_duration, shift_date, to_datetime
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "ParseError",
    "parse_all_of",
    "parse_any_of",
    "parse_regex",
    "DateTimeFields",
    "add_duration",
    "shift_date",
    "to_datetime",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
