from datetime import date

from src.models.cliente import Cliente
from src.models.mensalidade import Mensalidade

API = "/api/v1"


def _payload_cliente(**extra):
    payload = {
        "tipo": "Cliente",
        "nomeCompleto": "Ana Souza",
        "dataNascimento": "1990-05-20",
        "sexo": "F",
        "cpf": "529.982.247-25",
    }
    payload.update(extra)
    return payload


def test_cadastra_cliente_com_ficha_de_saude(client):
    response = client.post(f"{API}/clientes", json=_payload_cliente(fichaSaude={
        "restricaoMedica": True,
        "restricaoMedicaQual": "Joelho",
        "objetivos": ["Emagrecimento", "Condicionamento"],
        "nivelAtividade": "Iniciante",
    }))

    assert response.status_code == 201
    data = response.json()
    assert data["cpf"] == "52998224725"
    assert data["ativo"] is True
    assert data["planoId"] is None
    assert isinstance(data["idade"], int)
    assert data["fichaSaude"]["objetivos"] == ["Emagrecimento", "Condicionamento"]
    assert data["fichaSaude"]["nivelAtividade"] == "Iniciante"
    assert data["fichaSaude"]["frequenciaDesejada"] == "TresPorSemana"
    assert data["fichaSaude"]["dataFicha"] == "2024-03-10"


def test_rejeita_cpf_invalido(client):
    response = client.post(f"{API}/clientes", json=_payload_cliente(cpf="529.982.247-26"))
    assert response.status_code == 400
    assert response.json()["detail"] == "CPF inválido"


def test_rejeita_cpf_duplicado(client):
    assert client.post(f"{API}/clientes", json=_payload_cliente()).status_code == 201
    response = client.post(f"{API}/clientes", json=_payload_cliente(nomeCompleto="Outra"))
    assert response.status_code == 400


def test_campos_obrigatorios_retornam_400(client):
    payload = _payload_cliente()
    del payload["nomeCompleto"]
    response = client.post(f"{API}/clientes", json=payload)
    assert response.status_code == 400
    assert "nomeCompleto" in response.json()["detail"]


def test_atualizacao_parcial_e_substituicao_da_ficha(client):
    criado = client.post(f"{API}/clientes", json=_payload_cliente(
        contato="(11) 99999-0000",
        fichaSaude={"objetivos": ["Hipertrofia"]},
    )).json()

    response = client.put(f"{API}/clientes/{criado['id']}", json={
        "ativo": False,
        "contato": None,
        "fichaSaude": {"objetivos": ["Saúde", "Força"]},
    })

    assert response.status_code == 200
    data = response.json()
    assert data["ativo"] is False
    assert data["contato"] is None
    assert data["nomeCompleto"] == "Ana Souza"
    assert data["fichaSaude"]["objetivos"] == ["Saúde", "Força"]


def test_filtra_lista_por_ativo(client):
    client.post(f"{API}/clientes", json=_payload_cliente())
    client.post(f"{API}/clientes", json=_payload_cliente(cpf="11144477735", nomeCompleto="Bruno", ativo=False))

    nomes = [c["nomeCompleto"] for c in client.get(f"{API}/clientes", params={"ativo": "true"}).json()]
    assert nomes == ["Ana Souza"]


def test_exclui_cliente(client):
    criado = client.post(f"{API}/clientes", json=_payload_cliente(fichaSaude={"objetivos": []})).json()
    assert client.delete(f"{API}/clientes/{criado['id']}").status_code == 204
    assert client.get(f"{API}/clientes/{criado['id']}").status_code == 404


class TestContratarPlano:
    def test_contrata_e_gera_primeira_mensalidade(self, client, db, criar_plano, criar_cliente):
        plano = criar_plano(valor=110.0)
        cliente = criar_cliente()

        response = client.post(f"{API}/clientes/{cliente.id}/contratar-plano",
                               json={"planoId": plano.id, "dataInicio": "2024-03-20"})

        assert response.status_code == 200
        assert response.json()["planoId"] == plano.id
        assert response.json()["plano"]["descricao"] == plano.descricao
        mensalidades = db.query(Mensalidade).filter(Mensalidade.cliente_id == cliente.id).all()
        assert len(mensalidades) == 1
        assert str(mensalidades[0].vencimento) == "2024-03-20"
        assert mensalidades[0].valor == 110.0
        assert mensalidades[0].situacao == "NaoPago"

    def test_sem_data_inicio_vence_hoje(self, client, db, criar_plano, criar_cliente):
        plano = criar_plano()
        cliente = criar_cliente()

        client.post(f"{API}/clientes/{cliente.id}/contratar-plano", json={"planoId": plano.id})

        assert str(db.query(Mensalidade).one().vencimento) == "2024-03-10"

    def test_contratar_de_novo_na_mesma_data_da_conflito(self, client, db, criar_plano, criar_cliente):
        plano = criar_plano()
        cliente = criar_cliente()
        url = f"{API}/clientes/{cliente.id}/contratar-plano"

        assert client.post(url, json={"planoId": plano.id, "dataInicio": "2024-03-20"}).status_code == 200
        assert client.post(url, json={"planoId": plano.id, "dataInicio": "2024-03-20"}).status_code == 409
        assert db.query(Mensalidade).count() == 1

    def test_plano_obrigatorio(self, client, criar_cliente):
        cliente = criar_cliente()
        response = client.post(f"{API}/clientes/{cliente.id}/contratar-plano", json={})
        assert response.status_code == 400
        assert response.json()["detail"] == "planoId é obrigatório"

    def test_cliente_ou_plano_inexistente(self, client, criar_plano, criar_cliente):
        plano = criar_plano()
        cliente = criar_cliente()
        assert client.post(f"{API}/clientes/999/contratar-plano", json={"planoId": plano.id}).status_code == 404
        assert client.post(f"{API}/clientes/{cliente.id}/contratar-plano", json={"planoId": 999}).status_code == 404


def test_objetivo_unico_vira_lista(client):
    response = client.post(f"{API}/clientes", json=_payload_cliente(fichaSaude={"objetivos": " Emagrecimento "}))
    assert response.status_code == 201
    assert response.json()["fichaSaude"]["objetivos"] == ["Emagrecimento"]


def test_idade_na_data_de_referencia():
    cliente = Cliente(data_nascimento=date(1990, 5, 20))
    assert cliente.idade_em(date(2024, 5, 19)) == 33
    assert cliente.idade_em(date(2024, 5, 20)) == 34
    assert Cliente().idade_em(date(2024, 5, 20)) is None
