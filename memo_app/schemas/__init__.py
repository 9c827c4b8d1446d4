from .memo import (
    MemoFormData,
    MemoResponse,
    MemoDeleteResponse
)

__all__ = [
    # Memo related schemas
    'MemoFormData',
    'MemoResponse',
    'MemoDeleteResponse',
]
