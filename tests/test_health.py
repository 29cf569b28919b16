"""healthcheck 엔드포인트 테스트"""


def test_health_check(client):
    response = client.get('/health/')

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/json'
    assert response.json() == {'status': 'ok'}
