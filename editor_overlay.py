"""인라인 번역 편집 오버레이

편집 모드에서 data-i18n-key가 붙은 요소를 클릭하면 요소 내용을 입력창으로
바꾸고, 저장하면 번역 저장소에 기록합니다. 한 번에 하나의 요소만 편집할 수
있으며 편집 상태는 오버레이 인스턴스가 소유합니다.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from dom_utils import (
    TRANSLATION_KEY_ATTR,
    contains,
    get_input_value,
    get_style,
    inner_html,
    is_element,
    iter_ancestors,
    new_element,
    set_inner_html,
    set_style,
    set_text_content,
    text_content,
)

logger = logging.getLogger(__name__)

MULTILINE_TAGS = {'P', 'DIV', 'TEXTAREA', 'BLOCKQUOTE', 'LI'}
MULTILINE_MIN_HEIGHT = 50
MULTILINE_MIN_LENGTH = 100
HANDLER_RESTORE_DELAY = 0.1

HOVER_STYLES = {
    'outline': '2px dashed #3b82f6',
    'outline-offset': '2px',
    'background-color': 'rgba(59, 130, 246, 0.1)',
    'cursor': 'pointer',
}

PX_RE = re.compile(r'^\s*([\d.]+)\s*px\s*$', re.IGNORECASE)


@dataclass
class EditingState:
    element: object
    key: str
    original_value: str
    original_html: str
    input_element: object
    multiline: bool = False


def is_multiline_element(tag_name, text, height=None):
    """textarea를 쓸지 판단 (태그, 높이, 글자 수 기준)"""
    if (tag_name or '').upper() in MULTILINE_TAGS:
        return True
    if height is not None and height > MULTILINE_MIN_HEIGHT:
        return True
    return len(text or '') > MULTILINE_MIN_LENGTH


def measure_element_height(element):
    """인라인 스타일의 height(px) 값, 없으면 None"""
    match = PX_RE.match(get_style(element, 'height'))
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def find_translatable(target):
    """대상에서 body 직전까지 올라가며 data-i18n-key가 있는 요소 탐색"""
    if not is_element(target):
        return None
    for element in iter_ancestors(target):
        if element.name == 'body':
            return None
        if element.has_attr(TRANSLATION_KEY_ATTR):
            return element
    return None


class EditorOverlay:
    def __init__(self, router, update_translation, on_edit_start=None, on_edit_end=None,
                 measure_height=measure_element_height):
        self.router = router
        self.document = router.document
        self.update_translation = update_translation
        self.on_edit_start = on_edit_start
        self.on_edit_end = on_edit_end
        self.measure_height = measure_height
        self.enabled = False
        self.current_language = 'en'
        self.editing_state = None
        self._attached = False

    @property
    def is_editing(self):
        return self.editing_state is not None

    # 리스너 등록

    def configure(self, enabled, current_language):
        """활성화 여부나 언어가 바뀌면 리스너를 모두 떼고 다시 붙임"""
        if enabled == self.enabled and current_language == self.current_language:
            return
        self.detach()
        self.enabled = enabled
        self.current_language = current_language
        if enabled:
            self.attach()

    def attach(self):
        if self._attached:
            return
        self.router.add_event_listener('click', self.handle_click, capture=True)
        self.router.add_event_listener('mouseover', self.handle_mouse_over, capture=False)
        self.router.add_event_listener('mouseout', self.handle_mouse_out, capture=False)
        self._attached = True

    def detach(self):
        if not self._attached:
            return
        self.router.remove_event_listener('click', self.handle_click, capture=True)
        self.router.remove_event_listener('mouseover', self.handle_mouse_over, capture=False)
        self.router.remove_event_listener('mouseout', self.handle_mouse_out, capture=False)
        self._attached = False

    # 편집 상태 전이

    def start_edit(self, element, key):
        original_value = text_content(element)
        original_html = inner_html(element)
        self._clear_hover(element)

        multiline = is_multiline_element(element.name, original_value, self.measure_height(element))

        input_class = 'i18n-inline-input'
        if multiline:
            input_element = new_element(self.document, 'textarea', text=original_value,
                                        class_=input_class, rows='3',
                                        style='min-height: 60px; resize: vertical')
        else:
            input_element = new_element(self.document, 'input', class_=input_class,
                                        type='text', value=original_value)

        key_badge = new_element(self.document, 'div', text=f'{key} [{self.current_language.upper()}]',
                                class_='i18n-key-badge')

        button_container = new_element(self.document, 'div', class_='i18n-inline-actions')
        save_button = new_element(self.document, 'button', text='Save',
                                  type='button', class_='i18n-inline-save')
        cancel_button = new_element(self.document, 'button', text='Cancel',
                                    type='button', class_='i18n-inline-cancel')
        button_container.append(save_button)
        button_container.append(cancel_button)

        element.clear()
        element.append(key_badge)
        element.append(input_element)
        element.append(button_container)

        self.router.set_handler(save_button, 'click', self._on_save_click)
        self.router.set_handler(cancel_button, 'click', self._on_cancel_click)
        self.router.set_handler(input_element, 'keydown', self._on_key_down)

        self.editing_state = EditingState(
            element=element,
            key=key,
            original_value=original_value,
            original_html=original_html,
            input_element=input_element,
            multiline=multiline,
        )

        self.router.focus(input_element)
        self.router.select_all(input_element)

        logger.debug(f'편집 시작: {key} [{self.current_language}]')
        if self.on_edit_start:
            self.on_edit_start()

    def save_edit(self):
        if self.editing_state is None:
            return False

        state = self.editing_state
        new_value = get_input_value(state.input_element).strip()

        # 낙관적 반영, 저장 실패 시에도 되돌리지 않음
        set_text_content(state.element, new_value)
        self.update_translation(self.current_language, state.key, new_value)

        self._finish_edit()
        return True

    def cancel_edit(self):
        if self.editing_state is None:
            return False

        state = self.editing_state
        set_inner_html(state.element, state.original_html)
        self._finish_edit()
        return True

    def _finish_edit(self):
        self.editing_state = None
        self.router.focus(None)
        self.router.forget_detached_handlers()
        if self.on_edit_end:
            self.on_edit_end()

    # 이벤트 핸들러

    def handle_click(self, event):
        target = event.target

        if self.editing_state is not None:
            if not contains(self.editing_state.element, target):
                self.cancel_edit()
            return

        translatable = find_translatable(target)
        if translatable is None:
            return

        # 버튼/링크의 원래 동작(이동, 제출 등)을 막음
        event.prevent_default()
        event.stop_propagation()
        event.stop_immediate_propagation()

        if translatable.name in ('button', 'a'):
            self._suspend_click_handler(translatable)

        key = translatable.get(TRANSLATION_KEY_ATTR)
        if not key:
            return

        self.start_edit(translatable, key)

    def _suspend_click_handler(self, element):
        original_handler = self.router.get_handler(element, 'click')
        self.router.set_handler(element, 'click', None)

        def restore():
            self.router.set_handler(element, 'click', original_handler)

        self.router.loop.call_later(HANDLER_RESTORE_DELAY, restore)

    def handle_mouse_over(self, event):
        if self.editing_state is not None:
            return
        translatable = find_translatable(event.target)
        if translatable is not None:
            for name, value in HOVER_STYLES.items():
                set_style(translatable, name, value)

    def handle_mouse_out(self, event):
        if self.editing_state is not None:
            return
        translatable = find_translatable(event.target)
        if translatable is not None:
            self._clear_hover(translatable)

    def _clear_hover(self, element):
        for name in HOVER_STYLES:
            set_style(element, name, '')

    def _on_save_click(self, event):
        event.prevent_default()
        event.stop_propagation()
        self.save_edit()

    def _on_cancel_click(self, event):
        event.prevent_default()
        event.stop_propagation()
        self.cancel_edit()

    def _on_key_down(self, event):
        if self.editing_state is None:
            return
        if event.key == 'Enter' and (not self.editing_state.multiline or event.ctrl_key):
            event.prevent_default()
            self.save_edit()
        elif event.key == 'Escape':
            event.prevent_default()
            self.cancel_edit()
