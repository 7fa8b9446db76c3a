from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.db.models import Contato


class ContatoRepository:
    """Repository for `Contato` operations.

    Methods only stage changes on the session; committing is left to the caller.
    """

    async def get(self, session: AsyncSession, contato_id: int) -> Optional[Contato]:
        """Fetch `Contato` by primary key.

        Args:
            session: Async database session.
            contato_id: Primary key to look up.

        Returns:
            Optional[Contato]: Found record or None.
        """

        return await session.get(Contato, contato_id)

    async def add(self, session: AsyncSession, contato: Contato) -> Contato:
        """Stage a new `Contato` and flush so its id is assigned.

        Args:
            session: Async database session.
            contato: Transient entity to insert.

        Returns:
            Contato: The same entity, now pending with an id.
        """

        session.add(contato)
        await session.flush()
        return contato

    async def update(
        self,
        session: AsyncSession,
        contato: Contato,
        nome: Optional[str],
        telefone: Optional[str],
        ativo: bool,
    ) -> Contato:
        """Overwrite the mutable fields of a persisted `Contato`.

        All three fields are replaced, including with None. The id is never touched.
        """

        contato.nome = nome
        contato.telefone = telefone
        contato.ativo = ativo
        session.add(contato)
        await session.flush()
        return contato

    async def remove(self, session: AsyncSession, contato: Contato) -> None:
        await session.delete(contato)
        await session.flush()

    async def list_by_nome(self, session: AsyncSession, nome: str) -> List[Contato]:
        """Return every `Contato` whose name contains `nome`.

        `%` and `_` in the search text are matched literally. Case sensitivity
        follows the database's LIKE.
        """

        stmt = select(Contato).where(Contato.nome.contains(nome, autoescape=True)).order_by(Contato.id)
        result = await session.execute(stmt)
        return list(result.scalars().all())
