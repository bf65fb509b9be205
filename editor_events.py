"""편집 화면용 이벤트 모델

브라우저 메인 스레드를 흉내 내는 단일 스레드 이벤트 루프와, 문서 단위
리스너(캡처/버블)와 요소별 핸들러(onclick 등)를 가진 이벤트 라우터.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time

from dom_utils import (
    contains,
    get_input_value,
    is_element,
    is_text_input,
    iter_ancestors,
    set_input_value,
)

logger = logging.getLogger(__name__)

DEFAULT_ACTION_TAGS = {'a', 'button'}


class TimerHandle:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class EventLoop:
    """call_soon / call_later 콜백을 등록 순서대로 실행하는 협력형 루프"""

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self._queue = []
        self._sequence = itertools.count()

    def call_later(self, delay, callback):
        handle = TimerHandle(self.clock() + max(0, delay), callback)
        heapq.heappush(self._queue, (handle.due, next(self._sequence), handle))
        return handle

    def call_soon(self, callback):
        return self.call_later(0, callback)

    def pending(self):
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def run_pending(self):
        """예정 시각이 지난 콜백 실행, 실행한 개수 반환"""
        executed = 0
        now = self.clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.callback()
            executed += 1
        return executed


class DomEvent:
    def __init__(self, type, target, key=None, ctrl_key=False):
        self.type = type
        self.target = target
        self.key = key
        self.ctrl_key = ctrl_key
        self.current_target = None
        self.default_prevented = False
        self.propagation_stopped = False
        self.immediate_propagation_stopped = False

    def prevent_default(self):
        self.default_prevented = True

    def stop_propagation(self):
        self.propagation_stopped = True

    def stop_immediate_propagation(self):
        self.propagation_stopped = True
        self.immediate_propagation_stopped = True

    def __repr__(self):
        return f'<DomEvent {self.type} target={getattr(self.target, "name", None)}>'


class EventRouter:
    """문서 최상위에서 이벤트를 먼저 가로챌 수 있는 라우터

    dispatch 순서: 문서 캡처 리스너 -> 대상에서 위로 요소 핸들러 -> 문서 버블 리스너
    """

    def __init__(self, document, loop=None):
        self.document = document
        self.loop = loop or EventLoop()
        self._listeners = {True: [], False: []}
        self._handlers = {}
        self.focused = None
        self.selection = None
        self.default_actions = []

    # 문서 리스너

    def add_event_listener(self, type, listener, capture=False):
        entry = (type, listener)
        if entry not in self._listeners[capture]:
            self._listeners[capture].append(entry)

    def remove_event_listener(self, type, listener, capture=False):
        entry = (type, listener)
        if entry in self._listeners[capture]:
            self._listeners[capture].remove(entry)

    def listener_count(self, type=None):
        return sum(1 for phase in self._listeners.values()
                   for listener_type, _ in phase if type is None or listener_type == type)

    # 요소 핸들러 (onclick, onkeydown ...)

    def set_handler(self, element, type, handler):
        _, handlers = self._handlers.setdefault(id(element), (element, {}))
        if handler is None:
            handlers.pop(type, None)
        else:
            handlers[type] = handler

    def get_handler(self, element, type):
        entry = self._handlers.get(id(element))
        if entry is None or entry[0] is not element:
            return None
        return entry[1].get(type)

    def forget_detached_handlers(self):
        """문서에서 분리된 요소의 핸들러 정리"""
        for key, (element, _) in list(self._handlers.items()):
            if not contains(self.document, element):
                del self._handlers[key]

    # 디스패치

    def _run_listeners(self, event, capture):
        for listener_type, listener in list(self._listeners[capture]):
            if listener_type != event.type:
                continue
            event.current_target = self.document
            listener(event)
            if event.immediate_propagation_stopped:
                return

    def dispatch(self, event):
        """이벤트 전달, 기본 동작이 취소되지 않았으면 True 반환"""
        path = list(iter_ancestors(event.target)) if is_element(event.target) else []

        self._run_listeners(event, capture=True)

        if not event.propagation_stopped:
            for element in path:
                handler = self.get_handler(element, event.type)
                if handler is not None:
                    event.current_target = element
                    handler(event)
                if event.propagation_stopped:
                    break

        if not event.propagation_stopped:
            self._run_listeners(event, capture=False)

        event.current_target = None
        if event.default_prevented:
            return False

        if event.type == 'click':
            for element in path:
                if element.name in DEFAULT_ACTION_TAGS:
                    self.default_actions.append((event.type, element))
                    break
        return True

    # 포커스와 입력

    def focus(self, element):
        self.focused = element
        self.selection = None

    def select_all(self, element):
        if is_text_input(element):
            self.selection = (0, len(get_input_value(element)))

    def click(self, element):
        return self.dispatch(DomEvent('click', element))

    def hover(self, element):
        return self.dispatch(DomEvent('mouseover', element))

    def unhover(self, element):
        return self.dispatch(DomEvent('mouseout', element))

    def press_key(self, key, ctrl_key=False):
        target = self.focused
        if target is None:
            target = self.document.body or self.document
        return self.dispatch(DomEvent('keydown', target, key=key, ctrl_key=ctrl_key))

    def type_text(self, text):
        """포커스된 입력 요소의 선택 영역을 text로 교체"""
        element = self.focused
        if not is_text_input(element) or not contains(self.document, element):
            logger.debug('포커스된 입력 요소가 없어 입력을 무시합니다.')
            return False

        value = get_input_value(element)
        start, end = self.selection or (len(value), len(value))
        set_input_value(element, value[:start] + text + value[end:])
        caret = start + len(text)
        self.selection = (caret, caret)
        return True
