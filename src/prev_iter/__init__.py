# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT

from .__about__ import __version__
from .lookback_iterator import LookbackIterator

__all__ = [
    "LookbackIterator",
    "__version__",
]
