from __future__ import annotations
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.db.models import Contato
from app.repositories.contato import ContatoRepository
from app.schemas.contato import ContatoIn

logger = logging.getLogger(__name__)


class ContatoService:
    """Contact operations. Every write is one staged change plus one commit."""

    def __init__(self) -> None:
        self.repo = ContatoRepository()

    async def criar(self, session: AsyncSession, data: ContatoIn) -> Contato:
        # Incoming id is ignored; the database assigns it
        contato = Contato(nome=data.nome, telefone=data.telefone, ativo=data.ativo)
        await self.repo.add(session, contato)
        await session.commit()
        await session.refresh(contato)
        logger.info("Contato created", extra={"contato_id": contato.id})
        return contato

    async def obter_por_id(self, session: AsyncSession, contato_id: int) -> Contato:
        contato = await self.repo.get(session, contato_id)
        if contato is None:
            logger.info("Contato not found", extra={"contato_id": contato_id})
            raise NotFoundError("Contato not found", {"contato_id": contato_id})
        return contato

    async def atualizar(self, session: AsyncSession, contato_id: int, data: ContatoIn) -> Contato:
        contato = await self.obter_por_id(session, contato_id)
        await self.repo.update(
            session,
            contato,
            nome=data.nome,
            telefone=data.telefone,
            ativo=data.ativo,
        )
        await session.commit()
        await session.refresh(contato)
        logger.info("Contato updated", extra={"contato_id": contato_id})
        return contato

    async def deletar(self, session: AsyncSession, contato_id: int) -> None:
        contato = await self.obter_por_id(session, contato_id)
        await self.repo.remove(session, contato)
        await session.commit()
        logger.info("Contato deleted", extra={"contato_id": contato_id})

    async def obter_por_nome(self, session: AsyncSession, nome: str) -> List[Contato]:
        return await self.repo.list_by_nome(session, nome)
