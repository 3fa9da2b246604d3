# SPDX-License-Identifier: MIT

from typing import Literal, get_args

CategoryType = Literal["development", "operation", "marketing", "legal"]

CATEGORIES: tuple[CategoryType, ...] = get_args(CategoryType)

CATEGORY_LABELS: dict[CategoryType, str] = {
    "development": "Development",
    "operation": "Operation",
    "marketing": "Marketing",
    "legal": "Legal",
}
