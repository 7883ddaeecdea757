import importlib

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from py_driftcalc import BaseEngineConfigDict, compute
from py_driftcalc.server import SECURITY_HEADERS, create_app
from tests.fixtures_and_helpers import create_308_record

pytestmark = pytest.mark.server


@pytest.fixture(scope="module")
def client():
    return TestClient(create_app())


def assert_security_headers(response):
    for name, value in SECURITY_HEADERS.items():
        assert response.headers[name] == value


class TestCalculate:

    def test_ok(self, client):
        response = client.post("/api/calculate", json=create_308_record())
        assert response.status_code == 200
        rows = response.json()
        assert isinstance(rows, list)
        assert rows == [row.to_dict() for row in compute(create_308_record())]
        assert rows[0]['velocity'] == 823
        assert rows[-1]['distance'] == 450
        assert set(rows[0]) == {'distance', 'velocity', 'energy', 'drop', 'windDrift', 'timeOfFlight', 'moa', 'mil'}
        assert response.headers["Cache-Control"] == "no-store"
        assert_security_headers(response)

    def test_integer_fields_accepted(self, client):
        record = {key: int(value) for key, value in create_308_record(bullet_weight=11,
                                                                       ballistic_coefficient=1).items()}
        response = client.post("/api/calculate", json=record)
        assert response.status_code == 200

    def test_malformed_json(self, client):
        response = client.post("/api/calculate", content=b'{"muzzleVelocity": 823,',
                               headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert "error" in response.json()
        assert_security_headers(response)

    @pytest.mark.parametrize("field_name, wire", [
        ('muzzle_velocity', 'muzzleVelocity'),
        ('ballistic_coefficient', 'ballisticCoefficient'),
        ('bullet_weight', 'bulletWeight'),
    ])
    def test_invalid_input(self, client, field_name, wire):
        response = client.post("/api/calculate", json=create_308_record(**{field_name: 0}))
        assert response.status_code == 400
        assert wire in response.json()["error"]
        assert_security_headers(response)

    def test_string_number_rejected(self, client):
        record = create_308_record()
        record['muzzleVelocity'] = "823"
        response = client.post("/api/calculate", json=record)
        assert response.status_code == 400
        assert "muzzleVelocity" in response.json()["error"]

    def test_missing_field(self, client):
        record = create_308_record()
        del record['targetDistance']
        response = client.post("/api/calculate", json=record)
        assert response.status_code == 400
        assert "targetDistance" in response.json()["error"]

    def test_not_an_object(self, client):
        response = client.post("/api/calculate", json=[823, 10.9])
        assert response.status_code == 400

    def test_range_error(self):
        client = TestClient(create_app(BaseEngineConfigDict(cMinimumVelocity=800.0)))
        response = client.post("/api/calculate", json=create_308_record())
        assert response.status_code == 400
        assert "Minimum velocity reached" in response.json()["error"]


class TestModuleApp:

    def test_uses_config_file(self, tmp_path, monkeypatch):
        server = importlib.import_module("py_driftcalc.server")
        (tmp_path / ".pydc.toml").write_text("[pydc]\ncLongRangeStep = 150\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        try:
            importlib.reload(server)
            response = TestClient(server.app).post("/api/calculate", json=create_308_record())
        finally:
            monkeypatch.undo()
            importlib.reload(server)
        assert response.status_code == 200
        assert [row['distance'] for row in response.json()] == [0, 150, 300, 450]


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert_security_headers(response)

    def test_unknown_route(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert_security_headers(response)
