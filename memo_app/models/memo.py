import uuid
from datetime import datetime, timezone

from sqlalchemy import DDL, JSON, Column, DateTime, Index, Text, Uuid, event, func
from sqlalchemy.dialects.postgresql import ARRAY

from memo_app.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


# ✅ PostgreSQL에서는 TEXT[], 그 외(테스트용 SQLite)에서는 JSON 배열로 저장
TagList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Memo(Base):
    """
    메모 기록을 저장하는 테이블
    """
    __tablename__ = "memos"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)  # 메모 제목
    content = Column(Text, nullable=False)  # 메모 내용
    category = Column(Text, nullable=False, default="personal", server_default="personal")
    tags = Column(TagList, default=lambda: [])  # 태그 목록 (NULL 가능, 읽을 때 []로 정규화)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow, server_default=func.now())

    __table_args__ = (
        # 카테고리 필터링용
        Index("idx_memos_category", "category"),
        # 최신순 정렬용
        Index("idx_memos_created_at", created_at.desc()),
        # 태그 배열 검색용 (PostgreSQL에서는 GIN)
        Index("idx_memos_tags", "tags", postgresql_using="gin"),
    )

    def __repr__(self):
        return f"<Memo(id={self.id}, title={self.title!r}, category={self.category})>"


# ✅ PostgreSQL 전용 DDL: 서버측 기본값, updated_at 트리거, RLS 정책
_POSTGRES_DDL = [
    "ALTER TABLE memos ALTER COLUMN id SET DEFAULT gen_random_uuid()",
    "ALTER TABLE memos ALTER COLUMN tags SET DEFAULT '{}'",
    """
    CREATE OR REPLACE FUNCTION update_updated_at_column()
    RETURNS TRIGGER AS $$
    BEGIN
      NEW.updated_at = NOW();
      RETURN NEW;
    END;
    $$ LANGUAGE plpgsql
    """,
    """
    CREATE TRIGGER update_memos_updated_at
      BEFORE UPDATE ON memos
      FOR EACH ROW
      EXECUTE FUNCTION update_updated_at_column()
    """,
    "ALTER TABLE memos ENABLE ROW LEVEL SECURITY",
    """
    CREATE POLICY "Allow all operations on memos" ON memos
      FOR ALL
      USING (true)
      WITH CHECK (true)
    """,
]

for _statement in _POSTGRES_DDL:
    event.listen(
        Memo.__table__,
        "after_create",
        DDL(_statement).execute_if(dialect="postgresql"),
    )
