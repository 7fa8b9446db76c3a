from __future__ import annotations
from typing import List
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.contato import ContatoIn, ContatoOut
from app.services.contato import ContatoService

router = APIRouter(prefix="/Contato", tags=["contato"])

_NOT_FOUND = {404: {"description": "Contato not found (empty body)"}}


def get_contato_service() -> ContatoService:
    return ContatoService()


@router.post("", response_model=ContatoOut, status_code=status.HTTP_201_CREATED)
async def criar(
    payload: ContatoIn,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
    svc: ContatoService = Depends(get_contato_service),
) -> ContatoOut:
    """Create a contact and point `Location` at its read-by-id route."""
    contato = await svc.criar(session, payload)
    response.headers["Location"] = str(request.url_for("obter_por_id", id=contato.id))
    return ContatoOut.model_validate(contato)


# Declared before /{id} so the literal segment is not parsed as an id
@router.get("/ObterPorNome", response_model=List[ContatoOut])
async def obter_por_nome(
    nome: str = Query(..., description="Substring to look for in the contact name"),
    session: AsyncSession = Depends(get_db),
    svc: ContatoService = Depends(get_contato_service),
) -> List[ContatoOut]:
    contatos = await svc.obter_por_nome(session, nome)
    return [ContatoOut.model_validate(c) for c in contatos]


@router.get("/{id}", response_model=ContatoOut, responses=_NOT_FOUND)
async def obter_por_id(
    id: int,
    session: AsyncSession = Depends(get_db),
    svc: ContatoService = Depends(get_contato_service),
) -> ContatoOut:
    contato = await svc.obter_por_id(session, id)
    return ContatoOut.model_validate(contato)


@router.put("/{id}", response_model=ContatoOut, responses=_NOT_FOUND)
async def atualizar(
    id: int,
    payload: ContatoIn,
    session: AsyncSession = Depends(get_db),
    svc: ContatoService = Depends(get_contato_service),
) -> ContatoOut:
    contato = await svc.atualizar(session, id, payload)
    return ContatoOut.model_validate(contato)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, responses=_NOT_FOUND)
async def deletar(
    id: int,
    session: AsyncSession = Depends(get_db),
    svc: ContatoService = Depends(get_contato_service),
) -> Response:
    await svc.deletar(session, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
