# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .api import ContactGridClient

__all__ = ["ContactGridClient"]
