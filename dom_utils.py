"""BeautifulSoup 트리를 렌더링된 DOM처럼 다루기 위한 도우미

스캐너와 인라인 편집기가 쓰는 연산만 제공합니다.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag

TRANSLATION_KEY_ATTR = 'data-i18n-key'


def parse_html(markup):
    return BeautifulSoup(markup, 'html.parser')


def is_element(node) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def is_text_node(node) -> bool:
    # Comment, Doctype 등도 NavigableString 하위 클래스
    return isinstance(node, NavigableString) and type(node) is NavigableString


def parent_element(node):
    parent = node.parent
    return parent if is_element(parent) else None


def iter_ancestors(element, include_self=True):
    """자신과 상위 요소를 가까운 순서로 반환"""
    current = element if include_self else parent_element(element)
    while current is not None and is_element(current):
        yield current
        current = parent_element(current)


def contains(ancestor, node) -> bool:
    if node is None:
        return False
    if node is ancestor:
        return True
    return any(parent is ancestor for parent in node.parents)


def tag_name(element) -> str:
    return (element.name or '').upper()


def parse_style(element) -> dict:
    declarations = {}
    for chunk in (element.get('style') or '').split(';'):
        if ':' not in chunk:
            continue
        name, value = chunk.split(':', 1)
        name = name.strip().lower()
        if name:
            declarations[name] = value.strip()
    return declarations


def get_style(element, name):
    return parse_style(element).get(name, '')


def set_style(element, name, value):
    """인라인 스타일 속성 설정 (빈 값이면 제거)"""
    declarations = parse_style(element)
    if value:
        declarations[name] = value
    else:
        declarations.pop(name, None)
    if declarations:
        element['style'] = '; '.join(f'{k}: {v}' for k, v in declarations.items())
    elif element.has_attr('style'):
        del element['style']


def class_list(element) -> list:
    classes = element.get('class') or []
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def class_name(element) -> str:
    return ' '.join(class_list(element))


def has_class(element, name) -> bool:
    return name in class_list(element)


def add_class(element, name):
    classes = class_list(element)
    if name not in classes:
        classes.append(name)
        element['class'] = classes


def remove_class(element, name):
    classes = [c for c in class_list(element) if c != name]
    if classes:
        element['class'] = classes
    elif element.has_attr('class'):
        del element['class']


def inner_html(element) -> str:
    return element.decode_contents()


def set_inner_html(element, markup):
    element.clear()
    fragment = parse_html(markup)
    for child in list(fragment.contents):
        element.append(child.extract())


def text_content(element) -> str:
    return element.get_text()


def set_text_content(element, text):
    element.clear()
    element.append(NavigableString(text))


def new_element(document, name, text=None, **attrs):
    element = document.new_tag(name)
    for key, value in attrs.items():
        element[key.rstrip('_').replace('_', '-')] = value
    if text is not None:
        element.append(NavigableString(text))
    return element


def is_text_input(element) -> bool:
    return is_element(element) and element.name in ('input', 'textarea')


def get_input_value(element) -> str:
    if element.name == 'textarea':
        return element.get_text()
    return element.get('value', '')


def set_input_value(element, value):
    if element.name == 'textarea':
        set_text_content(element, value)
    else:
        element['value'] = value
