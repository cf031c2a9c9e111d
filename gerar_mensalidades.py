import logging
import argparse
from datetime import datetime

from src.database import SessionLocal
# --- Importações de todos os modelos (necessárias para os relacionamentos) ---
from src.models.cliente import Cliente
from src.models.ficha_saude import FichaSaude
from src.models.forma_pagamento import FormaPagamento
from src.models.mensalidade import Mensalidade
from src.models.movimento_caixa import MovimentoCaixa
from src.models.plano import Plano
# ------------------------------------------------------
from src.config import Config
from src.jobs.mensalidades import executar_varredura

# Configuração básica de logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def main(argv=None):
    """
    Executa uma vez a varredura de mensalidades, fora do agendador da API.
    Útil para rodar via cron ou para reprocessar uma data passada.
    """
    parser = argparse.ArgumentParser(description='Gerador das próximas mensalidades')
    parser.add_argument('--data', help='Data de referência (AAAA-MM-DD). Padrão: hoje')
    parser.add_argument('--dias', type=int, default=Config.DIAS_ANTECEDENCIA,
                        help='Dias de antecedência da janela (padrão: %(default)s)')
    args = parser.parse_args(argv)

    if args.data:
        try:
            referencia = datetime.strptime(args.data, "%Y-%m-%d")
        except ValueError:
            logging.error("Data inválida fornecida nos parâmetros.")
            return 1
        logging.info(f"MODO MANUAL: referência {referencia.date()}")
    else:
        referencia = datetime.now()
        logging.info(f"MODO AUTOMÁTICO: referência {referencia.date()}")

    criadas = executar_varredura(SessionLocal, relogio=lambda: referencia, dias=args.dias)
    return 0 if criadas is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
