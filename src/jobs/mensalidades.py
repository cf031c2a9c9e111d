# -*- coding: utf-8 -*-
"""
Agendamento da varredura diária de mensalidades.

Uma thread em segundo plano dorme até o próximo horário configurado
(06:00 por padrão) e chama gerar_proximas_mensalidades com uma sessão nova.
"""
import logging
from datetime import datetime, timedelta
from threading import Event, Thread

from src.services.mensalidades import DIAS_ANTECEDENCIA_PADRAO, gerar_proximas_mensalidades, relogio_padrao


def proxima_execucao(agora, hora, minuto=0):
    """Próximo instante HH:MM estritamente depois de `agora`."""
    alvo = agora.replace(hour=hora, minute=minuto, second=0, microsecond=0)
    if alvo <= agora:
        alvo += timedelta(days=1)
    return alvo


def executar_varredura(session_factory, relogio=relogio_padrao, dias=DIAS_ANTECEDENCIA_PADRAO):
    """
    Executa uma varredura completa. Nunca propaga erros: a falha é registrada
    no log e o agendador segue para o dia seguinte.
    """
    db = session_factory()
    try:
        criadas = gerar_proximas_mensalidades(db, referencia=relogio(), dias=dias, relogio=relogio)
        logging.info(f"[Job] Próximas mensalidades verificadas/geradas: {criadas} nova(s).")
        return criadas
    except Exception:
        db.rollback()
        logging.exception("[Job] Erro ao gerar próximas mensalidades")
        return None
    finally:
        db.close()


class AgendadorMensalidades:
    """Dispara executar_varredura uma vez por dia no horário configurado."""

    def __init__(self, session_factory, hora=6, minuto=0, dias=DIAS_ANTECEDENCIA_PADRAO, relogio=relogio_padrao):
        self._session_factory = session_factory
        self._hora = hora
        self._minuto = minuto
        self._dias = dias
        self._relogio = relogio
        self._parar = Event()
        self._thread = None

    @property
    def ativo(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def segundos_ate_proxima(self) -> float:
        agora = self._relogio()
        return max((proxima_execucao(agora, self._hora, self._minuto) - agora).total_seconds(), 0.0)

    def iniciar(self):
        if self.ativo:
            return
        self._parar.clear()
        self._thread = Thread(target=self._loop, name="agendador-mensalidades", daemon=True)
        self._thread.start()
        logging.info(f"Agendador de mensalidades iniciado (diariamente às {self._hora:02d}:{self._minuto:02d}).")

    def parar(self, timeout=5.0):
        self._parar.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logging.info("Agendador de mensalidades parado.")

    def _loop(self):
        while not self._parar.is_set():
            # wait() devolve True quando parar() é chamado durante a espera
            if self._parar.wait(self.segundos_ate_proxima()):
                break
            executar_varredura(self._session_factory, relogio=self._relogio, dias=self._dias)
