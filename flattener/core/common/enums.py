# File: flattener/core/common/enums.py

from enum import Enum, unique

@unique
class FlattenStatus(str, Enum):
    NOTHING_TO_DO = "nothing_to_do"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
