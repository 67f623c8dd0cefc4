def _events(socket_client):
    return {message['name']: message['args'][0] for message in socket_client.get_received()}


def _start(socket_client):
    socket_client.emit('new_game')
    events = _events(socket_client)
    assert 'game_started' in events
    return events['game_started']['game_id']


def test_new_game_event(socket_client):
    socket_client.emit('new_game')
    payload = _events(socket_client)['game_started']

    assert payload['success']
    assert payload['state']['status'] == 'IN_PROGRESS'


def test_submit_guess_event(socket_client):
    game_id = _start(socket_client)
    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'speed'})
    payload = _events(socket_client)['guess_result']

    assert payload['result']['guess'] == 'SPEED'
    assert payload['state']['current_round'] == 1


def test_rejected_guess_event(socket_client):
    game_id = _start(socket_client)
    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'zzzzz'})
    payload = _events(socket_client)['guess_rejected']

    assert not payload['success']
    assert payload['error_code'] == 'NOT_IN_WORD_LIST'


def test_guess_for_unknown_game(socket_client):
    socket_client.emit('submit_guess', {'game_id': 'nope', 'guess': 'crane'})
    assert _events(socket_client)['guess_rejected']['error_code'] == 'GAME_NOT_FOUND'


def test_winning_and_reset_events(socket_client):
    game_id = _start(socket_client)
    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'CRANE'})
    payload = _events(socket_client)['guess_result']
    assert payload['state']['won']
    assert payload['state']['answer'] == 'CRANE'

    socket_client.emit('reset_game', {'game_id': game_id})
    payload = _events(socket_client)['game_reset']
    assert payload['state']['guesses'] == []
    assert payload['state']['status'] == 'IN_PROGRESS'


def test_non_object_payloads_are_rejected(socket_client):
    socket_client.emit('submit_guess', 'crane')
    assert _events(socket_client)['guess_rejected']['error'] == 'Guess is required'

    socket_client.emit('reset_game', 'crane')
    assert _events(socket_client)['game_error']['error_code'] == 'GAME_NOT_FOUND'
