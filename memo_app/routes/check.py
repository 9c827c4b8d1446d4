from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from ..core import get_db

router = APIRouter()

@router.get("/database")
async def check_db(db: AsyncSession = Depends(get_db)):
  try:
    await db.execute(text("SELECT 1"))
    return {"status": "DB 연결 성공!"}
  except Exception as e:
    return {"status": "DB 연결 실패", "error": str(e)}
