import json

from translation_highlight import HIGHLIGHT_STYLE_ID


def test_marketing_page_renders_keys(client):
    response = client.get('/?lang=hy')
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'data-i18n-key="hero.title"' in body
    assert '<html lang="hy">' in body


def test_marketing_page_unknown_language_falls_back(client):
    body = client.get('/?lang=de').get_data(as_text=True)
    assert 'Create Your Perfect Wedding Website' in body


def test_get_all_translations(client):
    response = client.get('/api/translations')
    assert response.status_code == 200
    data = response.get_json()
    assert set(data) == {'en', 'hy', 'ru'}
    assert data['en']['hero']['title'] == 'Create Your Perfect Wedding Website'
    assert len(data['en']['features']['items']) == 3


def test_get_all_translations_on_corrupt_file(client, translations_file):
    with open(translations_file, 'w', encoding='utf-8') as f:
        f.write('[]')
    response = client.get('/api/translations')
    assert response.status_code == 200
    assert response.get_json() == {'en': {}, 'hy': {}, 'ru': {}}


def test_get_language_translations(client):
    response = client.get('/api/translations/ru')
    assert response.status_code == 200
    assert 'hero' in response.get_json()

    assert client.get('/api/translations/de').status_code == 404


def test_flat_translations(client):
    data = client.get('/api/translations/flat/all').get_json()
    assert set(data['hero.title']) == {'en', 'hy', 'ru'}


def test_update_translation(client):
    response = client.put('/api/translations', json={'language': 'en', 'key': 'hero.title', 'value': 'Hello'})

    assert response.status_code == 200
    payload = response.get_json()
    assert payload['success'] is True
    assert payload['message'] == 'Translation updated'
    assert payload['translations']['hero']['title'] == 'Hello'
    assert client.get('/api/translations/en').get_json()['hero']['title'] == 'Hello'


def test_update_translation_rejects_bad_input(client):
    assert client.put('/api/translations', data='nope', content_type='text/plain').status_code == 400

    response = client.put('/api/translations', json={'language': 'de', 'key': 'a', 'value': 'x'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False

    assert client.put('/api/translations', json={'language': 'en', 'key': 'a', 'value': 3}).status_code == 400


def test_bulk_update(client):
    response = client.post('/api/translations/bulk',
                           json={'language': 'hy', 'updates': {'hero.cta': 'Սկսել', 'hero.title': 'Վերնագիր'}})
    assert response.status_code == 200
    assert response.get_json()['translations']['hero']['cta'] == 'Սկսել'

    assert client.post('/api/translations/bulk', json={'language': 'xx', 'updates': {}}).status_code == 400


def test_validate_and_reset(client):
    client.put('/api/translations', json={'language': 'hy', 'key': 'hero.title', 'value': ''})

    status = client.get('/api/translations/validate').get_json()
    assert status['isComplete'] is False
    assert status['empty']['hy'] == 1

    response = client.post('/api/translations/reset')
    assert response.status_code == 200
    assert response.get_json()['success'] is True
    assert client.get('/api/translations/validate').get_json()['isComplete'] is True


def test_rendered_page_is_fully_covered(client):
    for language in ('en', 'hy', 'ru'):
        data = client.get(f'/api/translations/coverage?language={language}').get_json()
        assert data['language'] == language
        assert data['coveragePercentage'] == 100
        assert data['missingKeys'] == []
        assert data['totalTextNodes'] > 0


def test_editor_page(client):
    response = client.get('/translations?lang=ru')
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'DOM Scan: 100% coverage' in body
    assert 'All translations complete' in body
    assert 'data-i18n-key="hero.title"' in body


def test_editor_page_highlight_styles(client):
    body = client.get('/translations?missing=1').get_data(as_text=True)
    assert HIGHLIGHT_STYLE_ID in body


def test_translations_file_written_as_json(client, translations_file):
    client.put('/api/translations', json={'language': 'ru', 'key': 'hero.title', 'value': 'Привет'})
    with open(translations_file, encoding='utf-8') as f:
        assert json.load(f)['ru']['hero.title'] == 'Привет'
