MISSES = ["REACT", "SPEED", "ERASE", "APPLE", "LEMON", "TIGER"]


def _new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def test_new_game(client):
    data = _new_game(client)
    assert data['success']
    assert data['state']['status'] == 'IN_PROGRESS'
    assert data['state']['max_rounds'] == 6
    assert data['state']['answer'] is None


def test_get_state(client):
    game_id = _new_game(client)['game_id']
    response = client.get(f'/api/game/{game_id}/state')

    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_get_state_unknown_game(client):
    response = client.get('/api/game/nope/state')
    assert response.status_code == 404
    assert response.get_json()['error_code'] == 'GAME_NOT_FOUND'


def test_submit_guess(client):
    game_id = _new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'react'})

    assert response.status_code == 200
    data = response.get_json()
    assert data['result']['verdicts'] == ['PRESENT', 'PRESENT', 'CORRECT', 'PRESENT', 'ABSENT']
    assert data['state']['current_round'] == 1
    assert data['state']['letter_status']['A'] == 'CORRECT'
    assert data['state']['guess_results'][0][0] == ['R', 'PRESENT']


def test_submit_guess_requires_body(client):
    game_id = _new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_submit_guess_validation_errors(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'cra'})
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'INVALID_LENGTH'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Not in word list'

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['current_round'] == 0


def test_submit_guess_unknown_game(client):
    response = client.post('/api/game/nope/guess', json={'guess': 'crane'})
    assert response.status_code == 404


def test_win_then_round_finished(client):
    game_id = _new_game(client)['game_id']
    data = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'}).get_json()

    assert data['result']['is_win']
    assert data['state']['won']
    assert data['state']['answer'] == 'CRANE'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'REACT'})
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'ROUND_FINISHED'


def test_loss_reveals_answer(client):
    game_id = _new_game(client)['game_id']
    for guess in MISSES:
        data = client.post(f'/api/game/{game_id}/guess', json={'guess': guess}).get_json()

    assert data['state']['status'] == 'LOST'
    assert data['state']['answer'] == 'CRANE'


def test_reset_game(client):
    game_id = _new_game(client)['game_id']
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})

    response = client.post(f'/api/game/{game_id}/reset')
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['status'] == 'IN_PROGRESS'
    assert state['guesses'] == []
    assert state['answer'] is None

    assert client.post('/api/game/nope/reset').status_code == 404


def test_delete_game(client):
    game_id = _new_game(client)['game_id']
    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_health(client):
    _new_game(client)
    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['target_words'] == 1
    assert data['valid_guesses'] == 11


def test_submit_guess_rejects_non_object_body(client):
    game_id = _new_game(client)['game_id']

    for body in (['guess', 'crane'], 'crane', 5):
        response = client.post(f'/api/game/{game_id}/guess', json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'
