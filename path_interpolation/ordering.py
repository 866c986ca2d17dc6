# Copyright 2025 Berkan Tali
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

"""Three-way comparison of scalars with an explicit outcome for NaN operands."""

from enum import Enum


class Ordering(Enum):
    """Result of comparing two scalars."""

    LESS = -1
    EQUAL = 0
    GREATER = 1
    UNDEFINED = None


def compare(a, b):
    """
    Compare two scalars.

    Args:
        a: Left operand
        b: Right operand

    Returns
    -------
    Ordering
        LESS, EQUAL or GREATER, or UNDEFINED if either operand is NaN

    """
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return Ordering.UNDEFINED
