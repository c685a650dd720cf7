from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ConsortiumType(str, Enum):
    AUTO = "Automóvel"
    REAL_ESTATE = "Imóvel"
    SERVICES = "Serviços"
    HEAVY_MACHINERY = "Pesados"
    MOTORCYCLE = "Moto"


class SaleStatus(str, Enum):
    PENDING = "Pendente"
    APPROVED = "Aprovado"
    CANCELLED = "Cancelado"


def new_sale_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Sale:
    """One consortium-quota sale. `date` is an ISO `YYYY-MM-DD` string."""
    id: str
    consultant_name: str
    client_name: str
    # Rows read back from storage are not validated, so unknown labels stay plain strings.
    type: Union[ConsortiumType, str]
    value: float
    date: str
    status: Union[SaleStatus, str]

    @property
    def type_label(self) -> str:
        return self.type.value if isinstance(self.type, ConsortiumType) else str(self.type)

    @property
    def status_label(self) -> str:
        return self.status.value if isinstance(self.status, SaleStatus) else str(self.status)
