# Em src/routes/dashboard_fastapi.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func

from src.database import get_db
from src.models.cliente import Cliente
from src.models.plano import Plano
from src.schemas.relatorio import Totalizadores

router = APIRouter(
    tags=["Dashboard"],
)


@router.get("/totalizadores", response_model=Totalizadores)
def get_totalizadores(db: Session = Depends(get_db)):
    """
    Quantidade de clientes ativos em cada plano (planos sem clientes aparecem com 0).
    """
    contagens = db.query(Cliente.plano_id, func.count(Cliente.id)).filter(
        Cliente.ativo == True,
        Cliente.plano_id.isnot(None),
    ).group_by(Cliente.plano_id).all()
    por_plano_id = {plano_id: total for plano_id, total in contagens}

    planos = db.query(Plano).order_by(Plano.descricao).all()
    totalizadores = [
        {
            "plano_id": p.id,
            "descricao": p.descricao,
            "tipo_assinatura": p.tipo_assinatura,
            "total_clientes": por_plano_id.get(p.id, 0),
        }
        for p in planos
    ]

    return {
        "por_plano": totalizadores,
        "total_clientes_ativos": sum(t["total_clientes"] for t in totalizadores),
    }
