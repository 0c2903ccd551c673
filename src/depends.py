from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.database import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_session(request: Request) -> AsyncSession:
    async with get_database(request).session() as session:
        yield session
