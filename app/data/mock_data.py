from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

from faker import Faker

from data.models import ConsortiumType, Sale, SaleStatus, new_sale_id


# Consortium credit ranges (BRL) by product, used for plausible demo values.
VALUE_RANGES = {
    ConsortiumType.AUTO: (40_000, 180_000),
    ConsortiumType.REAL_ESTATE: (150_000, 900_000),
    ConsortiumType.SERVICES: (10_000, 40_000),
    ConsortiumType.HEAVY_MACHINERY: (250_000, 1_200_000),
    ConsortiumType.MOTORCYCLE: (12_000, 60_000),
}
STATUS_WEIGHTS = {SaleStatus.APPROVED: 0.6, SaleStatus.PENDING: 0.3, SaleStatus.CANCELLED: 0.1}


def canned_sales() -> list[Sale]:
    """The two example sales behind "Gerar Dados de Teste". Fresh ids on every call."""
    return [
        Sale(
            id=new_sale_id(),
            consultant_name="Ana Silva",
            client_name="Transportadora Veloz",
            type=ConsortiumType.HEAVY_MACHINERY,
            value=450000.0,
            date="2024-05-10",
            status=SaleStatus.APPROVED,
        ),
        Sale(
            id=new_sale_id(),
            consultant_name="Carlos Souza",
            client_name="João Ferreira",
            type=ConsortiumType.AUTO,
            value=80000.0,
            date="2024-05-12",
            status=SaleStatus.APPROVED,
        ),
    ]


def random_sales(n_rows: int, seed: int = 7, end: Optional[date] = None, n_consultants: int = 6) -> list[Sale]:
    """Synthetic sales over the last ~90 days, for seeding demo mode."""
    rnd = random.Random(seed)
    fake = Faker("pt_BR")
    fake.seed_instance(seed)
    end = end or date.today()

    consultants = [fake.name() for _ in range(n_consultants)]
    statuses = list(STATUS_WEIGHTS)
    weights = list(STATUS_WEIGHTS.values())

    rows = []
    for _ in range(n_rows):
        kind = rnd.choice(list(ConsortiumType))
        lo, hi = VALUE_RANGES[kind]
        rows.append(
            Sale(
                id=new_sale_id(),
                consultant_name=rnd.choice(consultants),
                client_name=fake.company() if kind == ConsortiumType.HEAVY_MACHINERY else fake.name(),
                type=kind,
                value=round(rnd.uniform(lo, hi), 2),
                date=(end - timedelta(days=rnd.randint(0, 90))).isoformat(),
                status=rnd.choices(statuses, weights=weights, k=1)[0],
            )
        )
    return rows
