"""
Status API tests, through the Flask test client
"""

import pytest

from simulator.core.building import Building
from simulator.core.command import Command
from simulator.exceptions import TransportError
from visualizer.http_server import create_app


@pytest.fixture
def building(engine):
    return Building(engine, lower_floor=0, higher_floor=5, max_riders=2)


@pytest.fixture
def client(building):
    app = create_app(building)
    app.config['TESTING'] = True
    return app.test_client()


def test_status(client):
    response = client.get('/api/status')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_building_state(client):
    data = client.get('/api/building').get_json()

    assert data['floor'] == 0
    assert data['door'] == 'CLOSED'
    assert data['higher_floor'] == 5
    assert data['riders'] == []


def test_add_rider(client, building, engine):
    response = client.post('/api/riders', json={'origin': 2, 'destination': 5})

    assert response.status_code == 201
    rider = response.get_json()['rider']
    assert (rider['origin'], rider['destination'], rider['state']) == (2, 5, 'WAITING')
    assert len(building.riders) == 1
    assert engine.notifications[0][:2] == ('call', 2)


def test_add_random_rider_without_body(client, building):
    response = client.post('/api/riders')

    assert response.status_code == 201
    assert len(building.riders) == 1


def test_add_rider_when_full(client, building):
    client.post('/api/riders')
    client.post('/api/riders')

    response = client.post('/api/riders')

    assert response.status_code == 200
    assert response.get_json()['added'] is False
    assert len(building.riders) == 2


def test_add_rider_out_of_range(client):
    response = client.post('/api/riders', json={'origin': 0, 'destination': 42})

    assert response.status_code == 400


def test_add_rider_refused_by_engine(client, engine):
    engine.call_error = TransportError('Resource "http://engine/call" is not found')

    response = client.post('/api/riders', json={'origin': 0, 'destination': 3})

    assert response.status_code == 503
    assert response.get_json()['error'] == 'Resource "http://engine/call" is not found'


def test_tick(client, engine):
    engine.script(Command.UP, Command.OPEN, Command.OPEN)

    first = client.post('/api/tick').get_json()
    second = client.post('/api/tick').get_json()
    third = client.post('/api/tick').get_json()

    assert (first['command'], first['applied'], first['floor']) == ('UP', True, 1)
    assert (second['door'], second['applied']) == ('OPEN', True)
    assert third['applied'] is False
    assert third['cause'] == "Command OPEN is not valid when door is OPEN at floor 1"
    assert client.get('/api/building').get_json()['floor'] == 0


def test_add_rider_with_string_floor(client, building, engine):
    response = client.post('/api/riders', json={'origin': '3', 'destination': 5})

    assert response.status_code == 400
    assert 'not an integer' in response.get_json()['error']
    assert building.riders == frozenset()
    assert engine.notifications == []
