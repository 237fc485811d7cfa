import pytest

from mdbridge import create_app, __version__
from mdbridge.config.system_settings import Settings
from mdbridge.services.files import ReadError


@pytest.fixture
def client():
    app = create_app(Settings(LOG_TO_FILE=False))
    app.config['TESTING'] = True
    return app.test_client()


def test_health(client):
    resp = client.get('/api/v1/health')
    assert resp.status_code == 200
    assert resp.get_json()['data'] == {'status': 'ok', 'version': __version__}


def test_read_file(client, tmp_path):
    p = tmp_path / 'doc.md'
    p.write_bytes(b'\xff\xfe' + '# 你好'.encode('utf-16-le'))
    resp = client.post('/api/v1/files/read', json={'path': str(p)})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body['success'] is True
    assert body['data'] == {'path': str(p), 'content': '# 你好'}


def test_read_missing_file_is_404(client, tmp_path):
    missing = str(tmp_path / 'missing.md')
    resp = client.post('/api/v1/files/read', json={'path': missing})
    body = resp.get_json()
    assert resp.status_code == 404
    assert body['success'] is False
    assert body['error']['code'] == 'NOT_FOUND'
    assert missing in body['error']['message']


def test_read_requires_path(client):
    resp = client.post('/api/v1/files/read', json={})
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'INVALID_ARGUMENT'


def test_save_file(client, tmp_path):
    p = tmp_path / 'saved.md'
    resp = client.post('/api/v1/files/save', json={'path': str(p), 'content': '# 保存\n'})
    assert resp.status_code == 200
    assert resp.get_json()['data']['path'] == str(p)
    assert p.read_bytes() == '# 保存\n'.encode('utf-8')


def test_save_requires_string_content(client, tmp_path):
    resp = client.post('/api/v1/files/save', json={'path': str(tmp_path / 'x.md'), 'content': 12})
    assert resp.status_code == 400


def test_save_into_missing_directory(client, tmp_path):
    target = str(tmp_path / 'nope' / 'x.md')
    resp = client.post('/api/v1/files/save', json={'path': target, 'content': 'x'})
    body = resp.get_json()
    assert resp.status_code == 404
    assert target in body['error']['message']


def test_list_files(client, tmp_path):
    (tmp_path / 'A').mkdir()
    (tmp_path / 'b.md').write_text('b', encoding='utf-8')
    (tmp_path / 'c.txt').write_text('c', encoding='utf-8')
    resp = client.post('/api/v1/files/list', json={'path': str(tmp_path)})
    data = resp.get_json()['data']
    assert resp.status_code == 200
    assert data['current_path'] == str(tmp_path)
    assert data['parent_path'] == str(tmp_path.parent)
    assert data['total_items'] == 2
    assert [i['name'] for i in data['items']] == ['A', 'b.md']
    assert data['items'][0]['is_dir'] is True
    assert data['items'][1]['children'] is None


def test_list_missing_directory(client, tmp_path):
    missing = str(tmp_path / 'gone')
    resp = client.post('/api/v1/files/list', json={'path': missing})
    body = resp.get_json()
    assert resp.status_code == 404
    assert missing in body['error']['message']


def test_wrong_method_uses_json_envelope(client):
    resp = client.get('/api/v1/files/read')
    assert resp.status_code == 405
    assert resp.get_json()['error']['code'] == 'METHOD_NOT_ALLOWED'


def test_oversized_save_is_rejected(tmp_path):
    app = create_app(Settings(LOG_TO_FILE=False, MAX_CONTENT_LENGTH=64))
    client = app.test_client()
    target = tmp_path / 'big.md'
    resp = client.post('/api/v1/files/save', json={'path': str(target), 'content': 'x' * 1024})
    assert resp.status_code == 413
    assert resp.get_json()['error']['code'] == 'PAYLOAD_TOO_LARGE'
    assert not target.exists()


def test_list_uses_configured_extensions(tmp_path):
    app = create_app(Settings(LOG_TO_FILE=False, MARKDOWN_EXTENSIONS='txt'))
    (tmp_path / 'a.md').write_text('a', encoding='utf-8')
    (tmp_path / 'b.txt').write_text('b', encoding='utf-8')
    resp = app.test_client().post('/api/v1/files/list', json={'path': str(tmp_path)})
    assert [i['name'] for i in resp.get_json()['data']['items']] == ['b.txt']


def test_read_permission_denied_is_403(tmp_path, monkeypatch):
    app = create_app(Settings(LOG_TO_FILE=False))
    target = str(tmp_path / 'locked.md')

    def deny(path):
        err = PermissionError(13, 'Permission denied')
        raise ReadError.from_os_error(path, err) from err

    monkeypatch.setattr(app.extensions['file_service'], 'read_file', deny)
    resp = app.test_client().post('/api/v1/files/read', json={'path': target})
    body = resp.get_json()
    assert resp.status_code == 403
    assert body['error']['code'] == 'PERMISSION_DENIED'
    assert target in body['error']['message']


def test_read_directory_is_500_read_failed(client, tmp_path):
    resp = client.post('/api/v1/files/read', json={'path': str(tmp_path)})
    body = resp.get_json()
    assert resp.status_code == 500
    assert body['error']['code'] == 'READ_FAILED'
    assert str(tmp_path) in body['error']['message']
