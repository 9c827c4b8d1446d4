from pydantic import AliasChoices, BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Optional

# ✅ 메모 작성/수정 폼 스키마
class MemoFormData(BaseModel):
    title: str
    content: str
    category: Optional[str] = None  # 없으면 DB 기본값('personal')
    tags: Optional[List[str]] = None  # 없으면 []

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("제목은 비워둘 수 없습니다.")
        return value


# ✅ 메모 응답 스키마 (외부에는 camelCase 키로 노출)
class MemoResponse(BaseModel):
    id: str
    title: str
    content: str
    category: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    class Config:
        from_attributes = True

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, value):
        return str(value)

    # DB에 NULL로 저장된 태그는 빈 리스트로 정규화
    @field_validator("tags", mode="before")
    @classmethod
    def tags_never_null(cls, value):
        return value if value is not None else []


# ✅ 삭제 응답 스키마
class MemoDeleteResponse(BaseModel):
    message: str
    memo_id: str
    deleted: bool


__all__ = [
    'MemoFormData',
    'MemoResponse',
    'MemoDeleteResponse',
]
