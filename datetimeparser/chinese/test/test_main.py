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

import os
from datetime import datetime, timedelta

import pytest
from dateutil import tz

import main
from datetimeparser import DateTimeParser

GROUNDTRUTH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "groundtruth.jsonl")


def test_resolve_base_time_with_offset():
    base_time = main.resolve_base_time("2022-08-12T12:34:56+08:00")
    assert base_time.utcoffset() == timedelta(hours=8)
    assert (base_time.hour, base_time.minute, base_time.second) == (12, 34, 56)


def test_resolve_base_time_applies_zone_to_naive():
    base_time = main.resolve_base_time("2022-08-12T12:34:56", "Asia/Shanghai")
    assert base_time.tzinfo is tz.gettz("Asia/Shanghai")


def test_resolve_base_time_unknown_zone():
    with pytest.raises(ValueError):
        main.resolve_base_time("2022-08-12T12:34:56", "Nowhere/Atlantis")


def test_parse_query_returns_none_on_failure():
    parser = DateTimeParser(datetime(2022, 8, 12, 12, 34, 56))
    assert main.parse_query(parser, "随便说说") is None
    assert main.parse_query(parser, "昨天", date_only=True) == datetime(2022, 8, 11)


def test_benchmark_groundtruth():
    lines = []
    total, success, errors = main.benchmark(GROUNDTRUTH, show_all_cases=False, writer=lines.append)
    assert errors == 0, "\n".join(lines)
    assert total == success == 22


def test_main_text(capsys):
    code = main.main(["--text", "两小时三分钟后", "--base_time", "2022-08-12T12:34:56+08:00"])
    assert code == 0
    assert "Result: 2022-08-12T14:37:56+08:00" in capsys.readouterr().out


def test_main_date_only(capsys):
    code = main.main(
        ["--text", "上周日", "--date-only", "--base_time", "2022-08-21T12:34:56+08:00"]
    )
    assert code == 0
    assert "Result: 2022-08-14T00:00:00+08:00" in capsys.readouterr().out


def test_main_unrecognized_text(capsys):
    code = main.main(["--text", "随便说说", "--base_time", "2022-08-12T12:34:56+08:00"])
    assert code == 1
    assert "无法识别" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--text", "明天8点", "--file", GROUNDTRUTH],
        ["--text", "明天8点", "--output", "out.txt"],
        ["--file", "missing.jsonl"],
    ],
)
def test_main_argument_errors(argv):
    assert main.main(argv) == 1


def test_main_file_with_output(tmp_path):
    output = tmp_path / "result.txt"
    assert main.main(["--file", GROUNDTRUTH, "--output", str(output)]) == 0
    report = output.read_text(encoding="utf-8")
    assert "BENCHMARK SUMMARY" in report
    assert "Error cases: 0" in report


def test_benchmark_counts_invalid_lines_and_continues(tmp_path):
    cases = tmp_path / "cases.jsonl"
    cases.write_text(
        "\n".join(
            [
                '{"query": "明天8点", "base_time": "not-a-time", "expected": null}',
                '{"query": "明天8点", "base_time": "2022-08-12T12:00:00+08:00", "expected": "bad"}',
                "{broken json",
                '{"base_time": "2022-08-12T12:00:00+08:00", "expected": null}',
                '{"query": "明天8点", "base_time": "2022-08-12T12:00:00+08:00",'
                ' "expected": "2022-08-13T08:00:00+08:00"}',
            ]
        ),
        encoding="utf-8",
    )
    lines = []
    total, success, errors = main.benchmark(str(cases), show_all_cases=False, writer=lines.append)
    assert (total, success, errors) == (5, 1, 4)
    assert sum("Invalid case" in line for line in lines) == 4
