# -*- coding: utf-8 -*-
"""
Regras do ciclo de cobrança das mensalidades.

- gerar_primeira_mensalidade: vincula o plano ao cliente e cria a primeira cobrança.
- registrar_pagamento: baixa a mensalidade e lança a entrada no caixa.
- gerar_proximas_mensalidades: corpo da varredura diária que antecipa a
  cobrança do próximo período para mensalidades prestes a vencer.

Todas as funções recebem a sessão do chamador e, onde precisam de "agora",
um relógio (callable sem argumentos que devolve datetime).
"""
import logging
from datetime import datetime, timedelta
from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from src.models.cliente import Cliente
from src.models.forma_pagamento import FormaPagamento
from src.models.mensalidade import Mensalidade
from src.models.movimento_caixa import MovimentoCaixa
from src.models.plano import Plano
from src.models.enums import SituacaoMensalidade, TipoAssinatura, TipoMovimento
from src.relogio import relogio_padrao
from src.services.erros import Conflito, ErroValidacao, EstadoInvalido, NaoEncontrado

DIAS_ANTECEDENCIA_PADRAO = 5

# Quantos meses cada tipo de assinatura avança o vencimento
MESES_POR_ASSINATURA = {
    TipoAssinatura.MENSAL.value: 1,
    TipoAssinatura.TRIMESTRAL.value: 3,
    TipoAssinatura.SEMESTRAL.value: 6,
    TipoAssinatura.ANUAL.value: 12,
}


def proximo_vencimento(vencimento_atual, tipo_assinatura):
    """
    Calcula o vencimento do próximo período a partir do vencimento atual.

    Usa aritmética de calendário (relativedelta): 31/01 + 1 mês = 28/02 ou 29/02.
    Tipos de assinatura desconhecidos avançam 1 mês.
    """
    meses = MESES_POR_ASSINATURA.get(tipo_assinatura)
    if meses is None:
        logging.warning(f"Tipo de assinatura desconhecido '{tipo_assinatura}', usando período mensal.")
        meses = 1
    if meses == 12:
        return vencimento_atual + relativedelta(years=1)
    return vencimento_atual + relativedelta(months=meses)


def _buscar_mensalidade(db, cliente_id, plano_id, vencimento):
    return db.query(Mensalidade).filter(
        Mensalidade.cliente_id == cliente_id,
        Mensalidade.plano_id == plano_id,
        Mensalidade.vencimento == vencimento,
    ).first()


def gerar_primeira_mensalidade(db, cliente_id, plano_id, valor, vencimento, relogio=relogio_padrao):
    """
    Define o plano ativo do cliente e cria a primeira mensalidade (NaoPago).

    As duas alterações são gravadas na mesma transação. Levanta NaoEncontrado
    se o cliente ou o plano não existem e Conflito se já houver mensalidade
    para o mesmo cliente/plano/vencimento.
    """
    cliente = db.query(Cliente).filter(Cliente.id == cliente_id).first()
    if not cliente:
        raise NaoEncontrado("Cliente não encontrado")
    plano = db.query(Plano).filter(Plano.id == plano_id).first()
    if not plano:
        raise NaoEncontrado("Plano não encontrado")

    if _buscar_mensalidade(db, cliente_id, plano_id, vencimento):
        raise Conflito("Já existe mensalidade deste plano para o cliente com este vencimento")

    mensalidade = Mensalidade(
        cliente_id=cliente_id,
        plano_id=plano_id,
        valor=valor,
        vencimento=vencimento,
        situacao=SituacaoMensalidade.NAO_PAGO.value,
        data_geracao=relogio(),
    )
    try:
        cliente.plano_id = plano_id
        db.add(mensalidade)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.warning(f"Conflito ao criar primeira mensalidade do cliente {cliente_id}: {e}")
        raise Conflito("Já existe mensalidade deste plano para o cliente com este vencimento")
    except Exception:
        db.rollback()
        raise

    db.refresh(mensalidade)
    logging.info(f"Cliente {cliente_id} contratou o plano {plano_id}; primeira mensalidade vence em {vencimento}")
    return mensalidade


def registrar_pagamento(db, mensalidade_id, forma_pagamento_id, valor=None, data=None, relogio=relogio_padrao):
    """
    Marca a mensalidade como paga e cria a entrada correspondente no caixa.

    `valor` e `data` são opcionais: por padrão usam o valor da mensalidade e
    o horário atual do relógio. A baixa e o lançamento são gravados juntos.
    Não gera a próxima mensalidade; isso fica a cargo da varredura diária.
    """
    if not forma_pagamento_id:
        raise ErroValidacao("formaPagamentoId é obrigatório")

    mensalidade = db.query(Mensalidade).options(
        joinedload(Mensalidade.cliente),
        joinedload(Mensalidade.plano),
    ).filter(Mensalidade.id == mensalidade_id).first()
    if not mensalidade:
        raise NaoEncontrado("Mensalidade não encontrada")
    if mensalidade.situacao == SituacaoMensalidade.PAGO.value:
        raise EstadoInvalido("Mensalidade já está paga")
    if mensalidade.situacao == SituacaoMensalidade.BONIFICADA.value:
        raise EstadoInvalido("Mensalidade bonificada não pode receber pagamento")

    forma = db.query(FormaPagamento).filter(FormaPagamento.id == forma_pagamento_id).first()
    if not forma:
        raise NaoEncontrado("Forma de pagamento não encontrada")

    valor_lancamento = valor if valor is not None else mensalidade.valor
    descricao = f"Mensalidade {mensalidade.plano.descricao} - {mensalidade.cliente.nome_completo}"
    cliente_id = mensalidade.cliente_id
    data_lancamento = data or relogio()

    try:
        # Baixa condicional: só uma requisição concorrente encontra a linha ainda NaoPago
        baixadas = db.query(Mensalidade).filter(
            Mensalidade.id == mensalidade_id,
            Mensalidade.situacao == SituacaoMensalidade.NAO_PAGO.value,
        ).update({"situacao": SituacaoMensalidade.PAGO.value}, synchronize_session=False)
        if baixadas == 0:
            db.rollback()
            logging.warning(f"Mensalidade {mensalidade_id} foi baixada por outra requisição.")
            raise EstadoInvalido("Mensalidade já está paga")

        db.add(MovimentoCaixa(
            data=data_lancamento,
            descricao=descricao,
            cliente_id=cliente_id,
            valor=valor_lancamento,
            tipo=TipoMovimento.ENTRADA.value,
            forma_pagamento_id=forma_pagamento_id,
            mensalidade_id=mensalidade_id,
        ))
        db.commit()
    except EstadoInvalido:
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(mensalidade)
    logging.info(f"Pagamento da mensalidade {mensalidade.id} registrado: R$ {valor_lancamento:.2f} via {forma.descricao}")
    return mensalidade


def janela_varredura(referencia, dias=DIAS_ANTECEDENCIA_PADRAO):
    """Primeiro e último dia (inclusive) considerados pela varredura."""
    inicio = referencia.date() if isinstance(referencia, datetime) else referencia
    return inicio, inicio + timedelta(days=dias)


def gerar_proximas_mensalidades(db, referencia=None, dias=DIAS_ANTECEDENCIA_PADRAO, relogio=relogio_padrao):
    """
    Gera a mensalidade do período seguinte para cobranças que vencem em breve.

    Seleciona mensalidades NaoPago com vencimento entre o dia de `referencia`
    e `dias` dias depois (inclusive), de clientes ativos com plano. Para cada
    uma cria, se ainda não existir, a mensalidade do próximo vencimento com o
    valor atual do plano.

    Pode ser executada várias vezes sem duplicar cobranças. Se outro processo
    criar a mesma mensalidade ao mesmo tempo, a violação de unicidade é
    ignorada. Falha em uma linha é registrada no log e não interrompe as demais.

    Retorna a quantidade de mensalidades criadas.
    """
    if referencia is None:
        referencia = relogio()
    inicio, fim = janela_varredura(referencia, dias)

    candidatas = db.query(Mensalidade).join(Cliente, Mensalidade.cliente_id == Cliente.id).options(
        joinedload(Mensalidade.plano),
        joinedload(Mensalidade.cliente),
    ).filter(
        Mensalidade.vencimento >= inicio,
        Mensalidade.vencimento <= fim,
        Mensalidade.situacao == SituacaoMensalidade.NAO_PAGO.value,
        Cliente.ativo == True,
        Cliente.plano_id.isnot(None),
    ).order_by(Mensalidade.vencimento, Mensalidade.id).all()

    # Copia os dados antes do laço: um rollback expira os objetos da sessão
    pendentes = [
        (m.id, m.cliente_id, m.plano_id, m.cliente.plano_id if m.cliente else None,
         m.vencimento, m.plano.tipo_assinatura if m.plano else None, m.plano.valor if m.plano else None)
        for m in candidatas
    ]
    logging.info(f"Varredura de mensalidades {inicio} a {fim}: {len(pendentes)} candidatas")

    criadas = 0
    for mensalidade_id, cliente_id, plano_id, plano_cliente_id, vencimento, tipo_assinatura, valor_plano in pendentes:
        # O filtro já exige plano; mantém a checagem para dados inconsistentes
        if not plano_id or not plano_cliente_id or valor_plano is None:
            logging.warning(f"Mensalidade {mensalidade_id} sem plano vinculado. Pulando.")
            continue

        try:
            novo_vencimento = proximo_vencimento(vencimento, tipo_assinatura)
            if _buscar_mensalidade(db, cliente_id, plano_id, novo_vencimento):
                continue
            db.add(Mensalidade(
                cliente_id=cliente_id,
                plano_id=plano_id,
                valor=valor_plano,
                vencimento=novo_vencimento,
                situacao=SituacaoMensalidade.NAO_PAGO.value,
                data_geracao=relogio(),
            ))
            db.commit()
        except IntegrityError:
            db.rollback()
            logging.info(
                f"Mensalidade do cliente {cliente_id} (plano {plano_id}, venc. {novo_vencimento}) "
                f"já criada por outra execução."
            )
            continue
        except Exception:
            db.rollback()
            logging.exception(f"Erro ao gerar a próxima mensalidade a partir da mensalidade {mensalidade_id}")
            continue

        criadas += 1
        logging.info(f"-> GERADA: cliente {cliente_id} | plano {plano_id} | Venc: {novo_vencimento} | R$ {valor_plano}")

    return criadas


# Dependência FastAPI; os testes substituem por um relógio fixo
def get_relogio():
    return relogio_padrao
