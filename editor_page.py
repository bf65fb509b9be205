"""번역 편집 페이지

실제 마케팅 페이지 사본 위에 스캐너, 강조 표시, 인라인 편집 오버레이,
번역 저장소 클라이언트를 조합합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from editor_events import EventRouter
from editor_overlay import EditorOverlay
from translation_client import TranslationStoreError, TranslationUpdateMutation
from translation_highlight import clear_highlights, highlight_missing_keys
from translation_scanner import log_missing_keys, scan_translation_coverage
from translation_store import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

SCAN_DELAY = 1.5
VALIDATION_POLL_INTERVAL = 5


@dataclass
class Notification:
    title: str
    description: str
    variant: str = 'default'


def _missing_and_empty(status):
    missing = sum(len(keys) for keys in (status.get('missing') or {}).values())
    empty = sum(count for count in (status.get('empty') or {}).values() if isinstance(count, int))
    return missing, empty


def validation_coverage(status):
    """검증 결과(누락 키, 빈 값)로 계산한 커버리지(%)"""
    if not status:
        return 0
    if status.get('isComplete'):
        return 100
    total = status.get('totalKeys') or 0
    if total <= 0:
        return 100
    missing, empty = _missing_and_empty(status)
    return max(0, int((total - missing - empty) / total * 100 + 0.5))


def format_status_lines(scan_result, validation_status):
    """편집 페이지 상단 상태 문구 (DOM 스캔, 번역 검증)"""
    lines = []
    if scan_result is not None:
        if scan_result.coverage_percentage < 100:
            lines.append(
                f'DOM Scan: {scan_result.coverage_percentage}% coverage • '
                f'{len(scan_result.missing_keys)} elements without data-i18n-key'
            )
        else:
            lines.append('DOM Scan: 100% coverage ✓ All text elements have translation keys')

    if validation_status:
        if validation_status.get('isComplete'):
            lines.append('All translations complete ✓')
        else:
            missing, empty = _missing_and_empty(validation_status)
            lines.append(f'{missing} missing keys, {empty} empty values')
    return lines


class TranslationEditorPage:
    def __init__(self, document, client, router=None, on_reload=None):
        self.document = document
        self.client = client
        self.router = router or EventRouter(document)
        self.loop = self.router.loop
        self.on_reload = on_reload

        self.is_edit_mode = True
        self.current_language = 'en'
        self.preview_language = 'en'
        self.is_editing = False
        self.scan_result = None
        self.show_missing_keys = False
        self.validation_status = None
        self.notifications = []

        self._scan_timer = None
        self._poll_timer = None

        self.update_mutation = TranslationUpdateMutation(
            client, self.loop,
            on_success=self._on_update_success,
            on_error=self._on_update_error,
        )
        self.overlay = EditorOverlay(
            self.router,
            self.update_mutation.mutate,
            on_edit_start=self._on_edit_start,
            on_edit_end=self._on_edit_end,
        )
        self.overlay.configure(self.is_edit_mode, self.current_language)
        self.schedule_scan()
        self.start_validation_polling()

    # 알림

    def notify(self, title, description, variant='default'):
        self.notifications.append(Notification(title, description, variant))

    def _on_update_success(self, language, key, value, result):
        self.notify('Translation updated', f'{key} = "{value}"')

    def _on_update_error(self, language, key, value, error):
        self.notify('Error', 'Failed to update translation', variant='destructive')

    def _on_edit_start(self):
        self.is_editing = True

    def _on_edit_end(self):
        self.is_editing = False

    # 모드, 언어

    def set_edit_mode(self, enabled):
        """편집 중에는 모드 전환 불가"""
        if self.is_editing:
            return False
        self.is_edit_mode = bool(enabled)
        self.overlay.configure(self.is_edit_mode, self.current_language)
        self.schedule_scan()
        return True

    def toggle_edit_mode(self):
        return self.set_edit_mode(not self.is_edit_mode)

    def set_current_language(self, language):
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f'지원하지 않는 언어입니다: {language}')
        self.current_language = language
        self.overlay.configure(self.is_edit_mode, self.current_language)
        self.schedule_scan()

    def set_preview_language(self, language):
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f'지원하지 않는 언어입니다: {language}')
        self.preview_language = language

    # 커버리지 스캔

    def schedule_scan(self):
        if self._scan_timer is not None:
            self._scan_timer.cancel()
            self._scan_timer = None
        if not self.is_edit_mode:
            return None
        self._scan_timer = self.loop.call_later(SCAN_DELAY, self.perform_scan)
        return self._scan_timer

    def perform_scan(self):
        self._scan_timer = None
        result = scan_translation_coverage(document=self.document)
        self.scan_result = result
        if result.missing_keys:
            log_missing_keys(result)
        self._sync_highlights()
        return result

    def toggle_missing_keys(self):
        self.show_missing_keys = not self.show_missing_keys
        self._sync_highlights()
        return self.show_missing_keys

    def _sync_highlights(self):
        if self.show_missing_keys and self.scan_result is not None:
            highlight_missing_keys(self.document, self.scan_result)
        else:
            clear_highlights(self.document)

    # 검증 상태

    def refresh_validation(self):
        try:
            self.validation_status = self.client.validate()
        except TranslationStoreError as exc:
            logger.warning(f'번역 검증 상태 조회 실패: {exc.message}')
        return self.validation_status

    def start_validation_polling(self):
        """다음 루프 차례부터 5초마다 검증 상태 조회 (이미 폴링 중이면 무시)"""
        if self._poll_timer is not None:
            return False
        self._poll_timer = self.loop.call_soon(self._poll_validation)
        return True

    def _poll_validation(self):
        self.refresh_validation()
        self._poll_timer = self.loop.call_later(VALIDATION_POLL_INTERVAL, self._poll_validation)

    def stop_validation_polling(self):
        if self._poll_timer is not None:
            self._poll_timer.cancel()
            self._poll_timer = None

    @property
    def coverage(self):
        return validation_coverage(self.validation_status)

    # 초기화

    def reset_translations(self):
        try:
            self.client.reset()
        except TranslationStoreError as exc:
            logger.error(f'번역 초기화 실패: {exc.message}')
            self.notify('Error', 'Failed to reset translations', variant='destructive')
            return False

        self.notify('Translations reset', 'All translations restored to defaults')
        if self.on_reload:
            self.on_reload()
        return True

    # 화면 표시

    def status_lines(self):
        return format_status_lines(self.scan_result, self.validation_status)

    def close(self):
        if self.overlay.is_editing:
            self.overlay.cancel_edit()
        self.overlay.configure(False, self.current_language)
        if self._scan_timer is not None:
            self._scan_timer.cancel()
            self._scan_timer = None
        self.stop_validation_polling()
        clear_highlights(self.document)
