def _submit(client, puzzle_id, player, time, **extra):
    return client.post(f'/rankings/{puzzle_id}/times', json={'player': player, 'time': time, **extra})


def test_health(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.json() == {'ok': True}


def test_config_reports_leaderboard_size(client):
    data = client.get('/config').json()
    assert data['leaderboard_size'] == 10


def test_submit_creates_ranking(client):
    res = _submit(client, 'azulejo-1', 'Ana', 42.5)
    assert res.status_code == 201
    data = res.json()
    assert data['entry']['player'] == 'Ana'
    assert data['entry']['time'] == 42.5
    assert 'submittedAt' in data['entry']

    ranking = client.get('/rankings/azulejo-1').json()
    assert ranking['puzzle_id'] == 'azulejo-1'
    assert [e['player'] for e in ranking['top_times']] == ['Ana']


def test_submissions_are_sorted_and_capped(client):
    for i, time in enumerate([30, 12, 55, 7, 19, 44, 3, 61, 25, 9, 14, 70]):
        assert _submit(client, 'azulejo-2', f'player{i}', time).status_code == 201

    ranking = client.get('/rankings/azulejo-2').json()
    times = [e['time'] for e in ranking['top_times']]
    assert times == [3, 7, 9, 12, 14, 19, 25, 30, 44, 55]


def test_slow_time_does_not_enter_full_board(client):
    for i in range(10):
        _submit(client, 'azulejo-3', f'p{i}', i + 1)
    _submit(client, 'azulejo-3', 'late', 500)
    times = [e['time'] for e in client.get('/rankings/azulejo-3').json()['top_times']]
    assert times == list(range(1, 11))


def test_same_player_can_hold_several_slots(client):
    _submit(client, 'azulejo-4', 'Rui', 20)
    _submit(client, 'azulejo-4', 'Rui', 10)
    players = [e['player'] for e in client.get('/rankings/azulejo-4').json()['top_times']]
    assert players == ['Rui', 'Rui']


def test_extra_entry_fields_are_kept(client):
    _submit(client, 'azulejo-5', 'Ana', 5, device='ios', submittedAt='2025-01-01T00:00:00Z')
    entry = client.get('/rankings/azulejo-5').json()['top_times'][0]
    assert entry['device'] == 'ios'
    assert entry['submittedAt'] == '2025-01-01T00:00:00Z'


def test_submit_validation(client):
    assert _submit(client, 'azulejo-6', '', 5).status_code == 400
    assert _submit(client, 'azulejo-6', 'Ana', 'fast').status_code == 400
    assert _submit(client, 'azulejo-6', 'Ana', -1).status_code == 400
    assert _submit(client, 'azulejo-6', 'Ana', True).status_code == 400
    assert _submit(client, 'azulejo-6', 'Ana', 10 ** 400).status_code == 400
    assert client.get('/rankings/azulejo-6').status_code == 404


def test_list_rankings(client):
    _submit(client, 'b-puzzle', 'Ana', 3)
    _submit(client, 'a-puzzle', 'Rui', 4)
    ids = [r['puzzle_id'] for r in client.get('/rankings').json()]
    assert ids == ['a-puzzle', 'b-puzzle']


def test_delete_ranking(client):
    _submit(client, 'azulejo-7', 'Ana', 3)
    res = client.delete('/rankings/azulejo-7')
    assert res.status_code == 200
    assert client.get('/rankings/azulejo-7').status_code == 404
    assert client.delete('/rankings/azulejo-7').status_code == 404


def test_overlong_puzzle_id_rejected(client):
    shared = 'a' * 128
    assert _submit(client, shared, 'Rui', 8).status_code == 201
    assert _submit(client, shared + 'X', 'Ana', 5).status_code == 400
    assert client.get(f'/rankings/{shared}Y').status_code == 400
    players = [e['player'] for e in client.get(f'/rankings/{shared}').json()['top_times']]
    assert players == ['Rui']


def test_timestamps_carry_utc_offset(client):
    _submit(client, 'azulejo-8', 'Ana', 3)
    ranking = client.get('/rankings/azulejo-8').json()
    assert ranking['created_at'].endswith('+00:00')
    assert ranking['updated_at'].endswith('+00:00')
    assert ranking['top_times'][0]['submittedAt'].endswith('+00:00')
