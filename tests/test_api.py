import json

from django.core.management import call_command
from django.core.management.base import CommandError
from io import StringIO

import pytest

from myngo.calls import ROOM_CODE_ALPHABET


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


def test_timing_defaults(client):
    res = client.get('/api/timing')
    assert res.status_code == 200
    data = res.json()
    assert data['players'] == 25
    assert data['meeting_minutes'] == 30
    assert data['call_interval'] == 50
    assert data['calls_needed'] == 37


def test_timing_with_params(client):
    data = client.get('/api/timing', {'players': 10, 'minutes': 15}).json()
    assert data['call_interval'] == 20
    assert data['calls_needed'] == 40


@pytest.mark.parametrize('params', [{'players': 'abc'}, {'players': 0}, {'minutes': -5}])
def test_timing_rejects_bad_input(client, params):
    res = client.get('/api/timing', params)
    assert res.status_code == 400
    assert 'error' in res.json()


def test_timing_rejects_huge_player_count(client):
    res = client.get('/api/timing', {'players': '1' + '0' * 400})
    assert res.status_code == 400
    assert 'error' in res.json()


def test_timing_requires_get(client):
    assert client.post('/api/timing').status_code == 405


def test_card_with_seed_is_reproducible(client):
    first = _post(client, '/api/card', {'seed': 99}).json()
    second = _post(client, '/api/card', {'seed': 99}).json()
    assert first == second
    assert len(first['card']['N']) == 4
    assert first['grid'][2][2] == 'FREE'


def test_card_rejects_bad_seed(client):
    assert _post(client, '/api/card', {'seed': 'x'}).status_code == 400
    res = client.post('/api/card', data='{nope', content_type='application/json')
    assert res.status_code == 400


def test_check_reports_win_and_near_win(client, fixed_card):
    data = _post(client, '/api/check', {'card': fixed_card, 'marked': [10, 25, 40, 55, 70]}).json()
    assert data['hasWin'] is True
    assert data['pattern'] == 'row'
    assert data['line'] == 3
    assert data['cells'] == [[3, c] for c in range(5)]

    data = _post(client, '/api/check', {'card': fixed_card, 'marked': [10, 25, 40, 55]}).json()
    assert data == {'hasWin': False, 'nearWin': True}


def test_check_fails_closed_on_bad_card(client):
    res = _post(client, '/api/check', {'card': {'M': [1]}, 'marked': [1, 2, 3]})
    assert res.status_code == 200
    assert res.json() == {'hasWin': False, 'nearWin': False}


def test_check_rejects_non_list_marks(client, fixed_card):
    assert _post(client, '/api/check', {'card': fixed_card, 'marked': 'lots'}).status_code == 400


def test_room_code(client):
    code = client.get('/api/room_code').json()['code']
    assert len(code) == 6
    assert all(ch in ROOM_CODE_ALPHABET for ch in code)


def test_plan_command():
    out = StringIO()
    call_command('myngo_plan', '--players', '10', '--minutes', '15', stdout=out)
    text = out.getvalue()
    assert 'Call a number every 20 seconds' in text
    assert 'numbers needed for a winner: 40' in text


def test_plan_command_rejects_zero_players():
    with pytest.raises(CommandError):
        call_command('myngo_plan', '--players', '0', stdout=StringIO())


def test_plan_command_rejects_huge_meeting():
    with pytest.raises(CommandError):
        call_command('myngo_plan', '--minutes', '1' + '0' * 400, stdout=StringIO())
