import json
import logging
import os
import re
import threading

from default_translations import DEFAULT_TRANSLATIONS

logger = logging.getLogger(__name__)

TRANSLATIONS_FILE = 'translations.json'
SUPPORTED_LANGUAGES = ('en', 'hy', 'ru')

NUMERIC_SEGMENT_RE = re.compile(r'^\d+$')

# 파일 단위 읽기-수정-쓰기 구간 보호 (동일 키 동시 수정은 마지막 쓰기가 이김)
_store_lock = threading.Lock()


def empty_structure():
    return {language: {} for language in SUPPORTED_LANGUAGES}


def flatten_object(obj, prefix=''):
    """중첩된 번역 트리를 점(.) 경로 키로 평탄화"""
    result = {}
    if isinstance(obj, dict):
        items = obj.items()
    elif isinstance(obj, list):
        items = enumerate(obj)
    else:
        return result

    for key, value in items:
        new_key = f'{prefix}.{key}' if prefix else str(key)
        if isinstance(value, str):
            result[new_key] = value
        elif isinstance(value, (dict, list)):
            result.update(flatten_object(value, new_key))
    return result


def _is_index(segment):
    return bool(NUMERIC_SEGMENT_RE.match(segment))


def _container_set(container, segment, value):
    if isinstance(container, list):
        index = int(segment)
        while len(container) <= index:
            container.append(None)
        container[index] = value
    else:
        container[segment] = value


def _container_get(container, segment):
    if isinstance(container, list):
        index = int(segment)
        return container[index] if index < len(container) else None
    return container.get(segment)


def unflatten_object(flat):
    """점(.) 경로 키를 중첩 트리로 복원 (숫자 세그먼트는 리스트로)"""
    result = {}
    for key, value in flat.items():
        segments = key.split('.')
        current = result
        for index, segment in enumerate(segments[:-1]):
            next_is_index = _is_index(segments[index + 1])
            if isinstance(current, list) and not _is_index(segment):
                logger.warning(f'리스트 위치에 문자열 세그먼트가 있어 건너뜁니다: {key}')
                break
            child = _container_get(current, segment)
            if not isinstance(child, (dict, list)):
                child = [] if next_is_index else {}
                _container_set(current, segment, child)
            current = child
        else:
            last = segments[-1]
            if isinstance(current, list) and not _is_index(last):
                logger.warning(f'리스트 위치에 문자열 세그먼트가 있어 건너뜁니다: {key}')
                continue
            _container_set(current, last, value)
    return result


def default_flat_translations():
    return {language: flatten_object(DEFAULT_TRANSLATIONS.get(language, {}))
            for language in SUPPORTED_LANGUAGES}


def _read_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError('번역 파일 형식이 올바르지 않습니다.')
    return data


def _write_file(path, data):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp_path = f'{path}.tmp'
    with open(tmp_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    os.replace(tmp_path, path)


def initialize_translations(path=TRANSLATIONS_FILE):
    """번역 파일이 없으면 기본 번역으로 생성"""
    if os.path.exists(path):
        return False
    logger.info(f'번역 저장소 초기화: {path}')
    _write_file(path, default_flat_translations())
    return True


def load_translations(path=TRANSLATIONS_FILE):
    """언어별 평탄화된 번역 로드 ({language: {key: value}})"""
    initialize_translations(path)
    try:
        data = _read_file(path)
    except (OSError, ValueError) as exc:
        logger.error(f'번역 파일 로드 실패: {exc}')
        return empty_structure()

    translations = empty_structure()
    for language, entries in data.items():
        if language not in translations:
            logger.warning(f'알 수 없는 언어는 건너뜁니다: {language}')
            continue
        if not isinstance(entries, dict):
            logger.warning(f'잘못된 번역 항목: {language}')
            continue
        translations[language] = {str(k): v for k, v in entries.items() if isinstance(v, str)}
    return translations


def save_translations(translations, path=TRANSLATIONS_FILE):
    _write_file(path, translations)


def validate_language(language):
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f'지원하지 않는 언어입니다: {language}')


def get_all_translations(path=TRANSLATIONS_FILE):
    """모든 언어의 번역을 중첩 구조로 반환"""
    grouped = {}
    for language, flat in load_translations(path).items():
        non_empty = {key: value for key, value in flat.items() if value}
        grouped[language] = unflatten_object(non_empty)
    return grouped


def get_language_translations(language, path=TRANSLATIONS_FILE):
    validate_language(language)
    return unflatten_object(load_translations(path)[language])


def get_flat_translations(path=TRANSLATIONS_FILE):
    """키별로 언어 값을 묶은 평탄 구조 ({key: {language: value}})"""
    by_key = {}
    for language, flat in load_translations(path).items():
        for key, value in flat.items():
            by_key.setdefault(key, {})[language] = value
    return by_key


def update_translation(language, key, value, path=TRANSLATIONS_FILE):
    """단일 번역 키 저장 후 해당 언어의 중첩 번역 반환"""
    validate_language(language)
    if not isinstance(key, str) or not key.strip():
        raise ValueError('번역 키가 필요합니다.')
    if not isinstance(value, str):
        raise ValueError('번역 값은 문자열이어야 합니다.')

    with _store_lock:
        translations = load_translations(path)
        translations[language][key] = value
        save_translations(translations, path)

    logger.info(f'번역 수정: {language}.{key} = {value}')
    return unflatten_object(translations[language])


def bulk_update_translations(language, updates, path=TRANSLATIONS_FILE):
    validate_language(language)
    if not isinstance(updates, dict):
        raise ValueError('updates는 객체여야 합니다.')
    for key, value in updates.items():
        if not key or not isinstance(value, str):
            raise ValueError(f'잘못된 번역 항목입니다: {key}')

    with _store_lock:
        translations = load_translations(path)
        translations[language].update(updates)
        save_translations(translations, path)

    logger.info(f'번역 일괄 수정: {language} ({len(updates)}개)')
    return unflatten_object(translations[language])


def reset_translations(path=TRANSLATIONS_FILE):
    """모든 번역을 기본값으로 되돌림"""
    with _store_lock:
        defaults = default_flat_translations()
        save_translations(defaults, path)
    logger.info('모든 번역을 기본값으로 초기화했습니다.')
    return {language: unflatten_object(flat) for language, flat in defaults.items()}


def validate_translations(path=TRANSLATIONS_FILE):
    """언어별 누락 키와 빈 값을 계산"""
    translations = load_translations(path)
    all_keys = set()
    for flat in translations.values():
        all_keys.update(flat.keys())

    missing = {}
    empty = {}
    for language in SUPPORTED_LANGUAGES:
        flat = translations[language]
        missing[language] = sorted(key for key in all_keys if key not in flat)
        empty[language] = sum(1 for value in flat.values() if not value.strip())

    return {
        'totalKeys': len(all_keys),
        'byLanguage': {language: len(translations[language]) for language in SUPPORTED_LANGUAGES},
        'missing': missing,
        'empty': empty,
        'isComplete': all(not keys for keys in missing.values()) and all(count == 0 for count in empty.values())
    }
