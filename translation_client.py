"""번역 저장소 HTTP 클라이언트

GET/PUT/POST /api/translations* 를 감싸고, 쓰기 후에는 번역 쿼리 캐시를
무효화한 뒤 다시 불러옵니다. 재시도는 하지 않습니다.
"""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

TRANSLATIONS_QUERY = 'translations'
LIVE_TRANSLATIONS_QUERY = 'live-translations'
VALIDATION_QUERY = 'translation-validation'

DEFAULT_TIMEOUT = 10


class TranslationStoreError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class QueryCache:
    """쿼리 그룹 단위로 무효화할 수 있는 간단한 캐시

    키는 튜플이며 첫 항목이 그룹 이름입니다. 예: ('live-translations', 'hy')
    """

    def __init__(self):
        self._entries = {}

    @staticmethod
    def _normalize(key):
        return key if isinstance(key, tuple) else (key,)

    def get(self, key, default=None):
        return self._entries.get(self._normalize(key), default)

    def set(self, key, value):
        self._entries[self._normalize(key)] = value

    def has(self, key):
        return self._normalize(key) in self._entries

    def invalidate(self, group):
        stale = [key for key in self._entries if key[0] == group]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def fetch(self, key, loader):
        key = self._normalize(key)
        if key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]


class TranslationStoreClient:
    def __init__(self, base_url='', session=None, timeout=DEFAULT_TIMEOUT, cache=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.cache = cache or QueryCache()

    def _request(self, method, path, **kwargs):
        url = f'{self.base_url}{path}'
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error(f'번역 저장소 요청 실패: {method} {url} - {exc}')
            raise TranslationStoreError(f'요청에 실패했습니다: {exc}') from exc

        if not response.ok:
            message = None
            try:
                payload = response.json()
                if isinstance(payload, dict):
                    message = payload.get('message')
            except ValueError:
                pass
            message = message or f'요청에 실패했습니다 ({response.status_code})'
            logger.warning(f'번역 저장소 오류 응답: {method} {url} {response.status_code} - {message}')
            raise TranslationStoreError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise TranslationStoreError('응답 형식이 올바르지 않습니다.', status_code=response.status_code) from exc

    # 조회

    def get_translations(self):
        return self.cache.fetch((TRANSLATIONS_QUERY,),
                                lambda: self._request('GET', '/api/translations'))

    def get_live_translations(self, language):
        return self.cache.fetch((LIVE_TRANSLATIONS_QUERY, language),
                                lambda: self._request('GET', f'/api/translations/{language}'))

    def get_flat_translations(self):
        return self._request('GET', '/api/translations/flat/all')

    def validate(self):
        status = self._request('GET', '/api/translations/validate')
        self.cache.set((VALIDATION_QUERY,), status)
        return status

    def refresh_translations(self):
        self.cache.invalidate(TRANSLATIONS_QUERY)
        return self.get_translations()

    # 쓰기

    def _after_write(self, refetch=True):
        self.cache.invalidate(TRANSLATIONS_QUERY)
        self.cache.invalidate(LIVE_TRANSLATIONS_QUERY)
        if not refetch:
            return
        try:
            self.refresh_translations()
        except TranslationStoreError as exc:
            # 쓰기는 이미 성공, 다음 조회 때 다시 불러옴
            logger.warning(f'번역 새로 고침 실패: {exc.message}')

    def update_translation(self, language, key, value):
        """번역 키 하나를 저장하고 캐시를 새로 고침"""
        result = self._request('PUT', '/api/translations',
                               json={'language': language, 'key': key, 'value': value})
        self._after_write()
        return result

    def bulk_update(self, language, updates):
        result = self._request('POST', '/api/translations/bulk',
                               json={'language': language, 'updates': updates})
        self._after_write()
        return result

    def reset(self):
        result = self._request('POST', '/api/translations/reset')
        self._after_write(refetch=False)
        self.cache.invalidate(VALIDATION_QUERY)
        return result


class TranslationUpdateMutation:
    """이벤트 루프에 PUT 요청을 예약하고 바로 반환 (결과는 콜백으로 통지)"""

    def __init__(self, client, loop, on_success=None, on_error=None):
        self.client = client
        self.loop = loop
        self.on_success = on_success
        self.on_error = on_error
        self.in_flight = 0

    def mutate(self, language, key, value):
        self.in_flight += 1
        return self.loop.call_soon(lambda: self._run(language, key, value))

    def _run(self, language, key, value):
        try:
            result = self.client.update_translation(language, key, value)
        except TranslationStoreError as exc:
            logger.error(f'번역 저장 실패: {language}.{key} - {exc.message}')
            if self.on_error:
                self.on_error(language, key, value, exc)
        else:
            if self.on_success:
                self.on_success(language, key, value, result)
        finally:
            self.in_flight -= 1
