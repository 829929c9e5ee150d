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

from abc import ABC, abstractmethod
from datetime import datetime

from ...core.combinators import Rule
from ...core.logger import get_logger
from ...core.time_utils import DateTimeFields


class BaseRule(ABC):
    """Base class for Chinese datetime grammar rules"""

    def __init__(self, base_time: datetime):
        """
        Initialize rule

        Args:
            base_time: Reference instant all relative expressions resolve against
        """
        self.base_time = base_time
        self.logger = get_logger(__name__)
        self._rule = self.build()

    @abstractmethod
    def build(self) -> Rule:
        """
        Compose the rule from matchers and combinators

        Returns:
            Rule: callable (text, result) -> rest
        """
        pass

    def parse(self, text: str, result: DateTimeFields) -> str:
        """
        Match the rule at the start of text

        Args:
            text: Unconsumed input
            result: Working record, updated only on success

        Returns:
            str: Remaining input

        Raises:
            ParseError: no alternative matched
        """
        return self._rule(text, result)

    __call__ = parse
