import json

import pytest

import translation_store as store
from default_translations import DEFAULT_TRANSLATIONS


def test_flatten_nested_dicts_and_lists():
    tree = {
        'hero': {'title': 'Hello', 'cta': 'Start'},
        'faq': {'items': [{'question': 'Q1', 'answer': 'A1'}, {'question': 'Q2', 'answer': 'A2'}]},
        'ignored': 3,
    }
    assert store.flatten_object(tree) == {
        'hero.title': 'Hello',
        'hero.cta': 'Start',
        'faq.items.0.question': 'Q1',
        'faq.items.0.answer': 'A1',
        'faq.items.1.question': 'Q2',
        'faq.items.1.answer': 'A2',
    }


def test_unflatten_restores_lists():
    flat = {'faq.items.1.question': 'Q2', 'faq.items.0.question': 'Q1', 'hero.title': 'Hello'}
    assert store.unflatten_object(flat) == {
        'faq': {'items': [{'question': 'Q1'}, {'question': 'Q2'}]},
        'hero': {'title': 'Hello'},
    }


def test_unflatten_defaults_round_trip():
    for tree in DEFAULT_TRANSLATIONS.values():
        assert store.unflatten_object(store.flatten_object(tree)) == tree


def test_default_languages_share_keys():
    flat = store.default_flat_translations()
    assert set(flat['en']) == set(flat['hy']) == set(flat['ru'])
    assert flat['en']['hero.title'] == 'Create Your Perfect Wedding Website'


def test_load_initializes_missing_file(translations_file):
    translations = store.load_translations(translations_file)

    assert translations['en']['hero.title'] == 'Create Your Perfect Wedding Website'
    with open(translations_file, encoding='utf-8') as f:
        assert set(json.load(f)) == {'en', 'hy', 'ru'}


def test_corrupt_file_gives_empty_structure(translations_file):
    with open(translations_file, 'w', encoding='utf-8') as f:
        f.write('{not json')
    assert store.load_translations(translations_file) == {'en': {}, 'hy': {}, 'ru': {}}


def test_load_skips_unknown_languages_and_non_strings(translations_file):
    with open(translations_file, 'w', encoding='utf-8') as f:
        json.dump({'en': {'a.b': 'x', 'a.c': 5}, 'de': {'a.b': 'y'}}, f)

    assert store.load_translations(translations_file) == {'en': {'a.b': 'x'}, 'hy': {}, 'ru': {}}


def test_update_translation_persists(translations_file):
    tree = store.update_translation('hy', 'hero.title', 'Բարև', path=translations_file)

    assert tree['hero']['title'] == 'Բարև'
    assert store.load_translations(translations_file)['hy']['hero.title'] == 'Բարև'
    assert store.get_language_translations('hy', translations_file)['hero']['title'] == 'Բարև'


def test_update_adds_new_key(translations_file):
    store.update_translation('en', 'footer.tagline', 'Made with love', path=translations_file)
    assert store.get_flat_translations(translations_file)['footer.tagline'] == {'en': 'Made with love'}


@pytest.mark.parametrize('language, key, value', [
    ('de', 'a.b', 'x'),
    ('en', '', 'x'),
    ('en', '   ', 'x'),
    ('en', 'a.b', 5),
])
def test_update_rejects_invalid_input(translations_file, language, key, value):
    with pytest.raises(ValueError):
        store.update_translation(language, key, value, path=translations_file)


def test_bulk_update(translations_file):
    store.bulk_update_translations('ru', {'hero.title': 'Привет', 'hero.cta': 'Начать'}, path=translations_file)
    flat = store.load_translations(translations_file)['ru']
    assert flat['hero.title'] == 'Привет'
    assert flat['hero.cta'] == 'Начать'

    with pytest.raises(ValueError):
        store.bulk_update_translations('ru', {'hero.title': None}, path=translations_file)


def test_validate_reports_missing_and_empty(translations_file):
    with open(translations_file, 'w', encoding='utf-8') as f:
        json.dump({
            'en': {'a': 'A', 'b': 'B', 'c': 'C'},
            'hy': {'a': 'Ա', 'b': ''},
            'ru': {'a': 'А', 'b': 'Б', 'c': '  '},
        }, f)

    status = store.validate_translations(translations_file)

    assert status['totalKeys'] == 3
    assert status['byLanguage'] == {'en': 3, 'hy': 2, 'ru': 3}
    assert status['missing'] == {'en': [], 'hy': ['c'], 'ru': []}
    assert status['empty'] == {'en': 0, 'hy': 1, 'ru': 1}
    assert status['isComplete'] is False


def test_defaults_are_complete(translations_file):
    status = store.validate_translations(translations_file)
    assert status['isComplete'] is True
    assert status['totalKeys'] == len(store.default_flat_translations()['en'])


def test_get_all_translations_skips_empty_values(translations_file):
    store.update_translation('hy', 'hero.title', '', path=translations_file)
    grouped = store.get_all_translations(translations_file)
    assert 'title' not in grouped['hy']['hero']
    assert grouped['en']['hero']['title'] == 'Create Your Perfect Wedding Website'


def test_reset_restores_defaults(translations_file):
    store.update_translation('en', 'hero.title', 'Changed', path=translations_file)
    store.update_translation('en', 'extra.key', 'Extra', path=translations_file)

    store.reset_translations(translations_file)

    flat = store.load_translations(translations_file)
    assert flat == store.default_flat_translations()
