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

import argparse
import json
import os
import sys
import time
from datetime import datetime

from dateutil import tz
from dateutil.parser import isoparse

from datetimeparser import DateTimeParser, ParseError
from datetimeparser.core.logger import get_logger

logger = get_logger(__name__)


def resolve_base_time(base_time=None, tz_name=None):
    """
    构造基准时间

    Args:
        base_time: ISO 8601 字符串，为空时取当前时间
        tz_name: IANA 时区名，基准时间不带时区时使用；为空时使用本地时区
    """
    zone = tz.gettz(tz_name) if tz_name else tz.tzlocal()
    if zone is None:
        raise ValueError(f"unknown time zone: {tz_name}")
    if not base_time:
        return datetime.now(zone)
    parsed = isoparse(base_time)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return parsed


def parse_query(parser, query, date_only=False):
    """解析单条表达式，失败返回 None"""
    try:
        if date_only:
            return parser.parse_date(query)
        return parser.parse_datetime(query)
    except ParseError:
        return None


def compare_results(calculated, ground_truth):
    """比较计算结果和ground truth（ISO 8601 字符串或 None）"""
    if calculated is None or ground_truth is None:
        return calculated is None and ground_truth is None
    return calculated == isoparse(ground_truth)


def benchmark(input_file, show_all_cases=True, writer=print, tz_name=None):
    """
    批量评测 jsonl 文件

    每行格式：{"query": ..., "base_time": ..., "mode": "datetime"|"date", "expected": ...}
    expected 为 null 表示期望解析失败。

    Returns:
        tuple: (总数, 成功数, 失败数)
    """
    total_cases = 0
    success_cases = 0
    error_cases = 0

    with open(input_file, encoding="utf-8") as fin:
        for line_num, line in enumerate(fin, 1):
            line = line.strip()
            if not line:
                continue
            total_cases += 1
            # 单行数据有误时记为失败，继续评测后续行
            try:
                data = json.loads(line)
                query = data["query"]
                base_time = resolve_base_time(data.get("base_time"), tz_name)
                date_only = data.get("mode", "datetime") == "date"
                gt = data.get("expected")

                _wall_start = time.time()
                result = parse_query(DateTimeParser(base_time), query, date_only=date_only)
                _wall_cost = time.time() - _wall_start
                matched = compare_results(result, gt)
            except (ValueError, KeyError, TypeError) as e:
                error_cases += 1
                writer(f"Line {line_num}: ✗ Invalid case | {e}")
                writer(f"  Raw: {line}")
                continue
            calculated = result.isoformat() if result is not None else None

            if matched:
                success_cases += 1
                if show_all_cases:
                    writer(f"Line {line_num}: ✓ Success | total={_wall_cost:.6f}s")
                    writer(f"  Query: {query}")
                    writer(f"  BaseTime: {base_time.isoformat()}")
                    writer(f"  Result: {calculated}")
            else:
                error_cases += 1
                writer(f"Line {line_num}: ✗ Mismatch | total={_wall_cost:.6f}s")
                writer(f"  Query: {query}")
                writer(f"  BaseTime: {base_time.isoformat()}")
                writer(f"  Calculated: {calculated}")
                writer(f"  Ground Truth: {gt}")

    writer("\n" + "=" * 80)
    writer("BENCHMARK SUMMARY")
    writer("=" * 80)
    writer(f"Total test cases: {total_cases}")
    if total_cases:
        writer(f"Success cases: {success_cases} ({success_cases/total_cases*100:.2f}%)")
        writer(f"Error cases: {error_cases} ({error_cases/total_cases*100:.2f}%)")
    return total_cases, success_cases, error_cases


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="中文时间表达式解析工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例：
  # 解析单条表达式
  python main.py --text "明天上午9点" --base_time "2025-01-21T08:00:00+08:00"

  # 只解析日期
  python main.py --text "上周日" --date-only

  # 批量评测
  python main.py --file datetimeparser/chinese/test/groundtruth.jsonl --tz Asia/Shanghai
        """,
    )
    parser.add_argument("--text", help="Input text string to parse")
    parser.add_argument("--file", help="Path to jsonl file for batch evaluation")
    parser.add_argument("--output", help="Path to output file for saving --file results")
    parser.add_argument(
        "--base_time",
        type=str,
        default=None,
        help="Base time for relative time calculations (ISO 8601 format), defaults to now",
    )
    parser.add_argument(
        "--tz",
        type=str,
        default=None,
        help="IANA time zone applied to naive base times, defaults to the local zone",
    )
    parser.add_argument(
        "--date-only",
        action="store_true",
        help="Resolve the date only, time of day is zero",
    )
    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Show successful cases in --file mode as well",
    )
    return parser


def main(argv=None):
    """Parse a single expression or evaluate a jsonl file."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.text and not args.file:
        print("错误：必须提供 --text 或 --file 参数之一\n")
        parser.print_help()
        return 1

    if args.text and args.file:
        print("错误：--text 和 --file 参数不能同时使用\n")
        parser.print_help()
        return 1

    if args.output and not args.file:
        print("错误：--output 参数只能与 --file 参数一起使用\n")
        parser.print_help()
        return 1

    if args.file and not os.path.exists(args.file):
        print(f"错误：文件不存在: {args.file}\n")
        return 1

    try:
        base_time = resolve_base_time(args.base_time, args.tz)
    except ValueError as e:
        print(f"错误：{e}\n")
        return 1

    start_time = time.time()
    if args.text:
        result = parse_query(DateTimeParser(base_time), args.text, date_only=args.date_only)
        print(f"Query: {args.text}")
        print(f"BaseTime: {base_time.isoformat()}")
        if result is None:
            print("Result: 无法识别")
            return 1
        print(f"Result: {result.isoformat()}")
    else:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:

                def writer(msg):
                    try:
                        print(msg)
                    except BrokenPipeError:
                        # 忽略管道中断错误（如使用 head 命令时）
                        pass
                    f.write(msg + "\n")

                benchmark(args.file, show_all_cases=args.show_all, writer=writer, tz_name=args.tz)
        else:
            benchmark(args.file, show_all_cases=args.show_all, tz_name=args.tz)

    logger.info(f"Total time: {time.time() - start_time}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
