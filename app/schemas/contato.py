from typing import Optional
from pydantic import BaseModel, ConfigDict


class ContatoIn(BaseModel):
    """Payload accepted by create and update.

    Attributes:
        id: Accepted for compatibility and ignored; the database assigns ids.
        nome: Display name. May be null.
        telefone: Phone number. May be null.
        ativo: Active flag, false when omitted.
    """

    id: Optional[int] = None
    nome: Optional[str] = None
    telefone: Optional[str] = None
    ativo: bool = False


class ContatoOut(BaseModel):
    """Public representation of a Contato.

    Attributes:
        id: Unique identifier.
        nome: Display name.
        telefone: Phone number.
        ativo: Active flag.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: Optional[str]
    telefone: Optional[str]
    ativo: bool
