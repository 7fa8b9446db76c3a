import asyncio
import logging
from sqlalchemy import select
from app.core.logging import setup_logging
from app.db.session import SessionLocal, engine
from app.db.base import Base
from app.db.models import Contato
logger = logging.getLogger(__name__)

SAMPLE_CONTATOS = [
    {"nome": "Ana Souza", "telefone": "11 99999-0001", "ativo": True},
    {"nome": "Bruno Lima", "telefone": "21 98888-0002", "ativo": True},
    {"nome": "Carla Dias", "telefone": "31 97777-0003", "ativo": False},
]


async def seed() -> None:
    """Seed sample contacts for development.

    Creates the table when it is missing and skips names that already exist.

    Returns:
        None
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as session:
        for data in SAMPLE_CONTATOS:
            res = await session.execute(select(Contato).where(Contato.nome == data["nome"]))
            if res.scalars().first() is not None:
                logger.info("Contato %s already exists; skipping", data["nome"])
                continue
            session.add(Contato(**data))
            logger.info("Seeded contato %s", data["nome"])
        await session.commit()

    await engine.dispose()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(seed())
