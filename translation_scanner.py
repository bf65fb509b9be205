"""번역 커버리지 스캐너

렌더링된 페이지 트리의 보이는 텍스트 노드를 순회하며 모든 사용자 노출 문자열에
``data-i18n-key`` 속성이 붙어 있는지 검사합니다.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from bs4 import BeautifulSoup

from dom_utils import (
    TRANSLATION_KEY_ATTR,
    class_name,
    is_element,
    is_text_node,
    iter_ancestors,
    parent_element,
    parse_style,
    tag_name,
)

logger = logging.getLogger(__name__)

EXCLUDED_TAGS = {'SCRIPT', 'STYLE', 'NOSCRIPT', 'SVG', 'PATH', 'DEFS'}
EXCLUDED_CLASSES = ('lucide', 'icon', 'emoji')
KEY_LOOKUP_DEPTH = 3

SYMBOLS_ONLY_RE = re.compile(r"^[\d\s.,!?;:'\"-]+$")
NON_TRANSLATABLE_PATTERNS = (
    re.compile(r'^[0-9]+$'),
    re.compile(r'^[0-9,. ]+$'),
    re.compile(r'^[+\-*/=<>]+$'),
    re.compile(r'^[©®™]+$'),
)
LETTER_RE = re.compile(r'[a-zA-ZÀ-ÿА-яԱ-Ֆա-ֆ]')


@dataclass
class MissingTranslationKey:
    element: object = field(repr=False, compare=False)
    text: str
    xpath: str
    parent_tag: str
    class_name: str


@dataclass
class ScanResult:
    total_text_nodes: int = 0
    translated_nodes: int = 0
    missing_keys: List[MissingTranslationKey] = field(default_factory=list)
    coverage_percentage: int = 100

    def to_dict(self):
        return {
            'totalTextNodes': self.total_text_nodes,
            'translatedNodes': self.translated_nodes,
            'coveragePercentage': self.coverage_percentage,
            'missingKeys': [
                {
                    'text': missing.text,
                    'xpath': missing.xpath,
                    'parentTag': missing.parent_tag,
                    'className': missing.class_name,
                }
                for missing in self.missing_keys
            ],
        }


def has_translation_key(element) -> bool:
    """요소와 상위 요소(3단계까지)에 data-i18n-key가 있는지 확인"""
    for depth, current in enumerate(iter_ancestors(element)):
        if depth >= KEY_LOOKUP_DEPTH:
            break
        if current.has_attr(TRANSLATION_KEY_ATTR):
            return True
    return False


def _is_hidden(element) -> bool:
    visibility = None
    for current in iter_ancestors(element):
        if tag_name(current) in EXCLUDED_TAGS:
            return True
        if current.has_attr('hidden'):
            return True
        if current.get('aria-hidden') == 'true':
            return True
        style = parse_style(current)
        if style.get('display', '').lower() == 'none':
            return True
        opacity = style.get('opacity', '')
        if opacity:
            try:
                if float(opacity) == 0:
                    return True
            except ValueError:
                pass
        if visibility is None and style.get('visibility'):
            visibility = style['visibility'].lower()
    return visibility in ('hidden', 'collapse')


def should_exclude_node(node) -> bool:
    element = parent_element(node)
    if element is None:
        return True

    if _is_hidden(element):
        return True

    # 테스트 식별자
    if element.has_attr('data-testid'):
        return True

    # 아이콘, 장식 요소
    classes = class_name(element)
    if any(cls in classes for cls in EXCLUDED_CLASSES):
        return True

    return False


def is_meaningful_text(text) -> bool:
    """공백, 숫자, 기호만으로 된 텍스트가 아닌지 확인"""
    trimmed = (text or '').strip()
    if not trimmed:
        return False
    if SYMBOLS_ONLY_RE.match(trimmed):
        return False
    if any(pattern.match(trimmed) for pattern in NON_TRANSLATABLE_PATTERNS):
        return False
    if not LETTER_RE.search(trimmed):
        return False
    # 한 글자
    if len(trimmed) < 2:
        return False
    return True


def get_element_xpath(element) -> str:
    element_id = element.get('id')
    if element_id:
        return f'//*[@id="{element_id}"]'

    parts = []
    for current in iter_ancestors(element):
        index = sum(1 for sibling in current.previous_siblings
                    if is_element(sibling) and sibling.name == current.name)
        nth = f'[{index + 1}]' if index > 0 else ''
        parts.insert(0, f'{current.name.lower()}{nth}')
    return '/' + '/'.join(parts)


def default_root(document):
    if isinstance(document, BeautifulSoup) and document.body is not None:
        return document.body
    return document


def iter_text_nodes(root):
    """제외되지 않은 의미 있는 텍스트 노드를 깊이 우선으로 순회"""
    for node in root.descendants:
        if not is_text_node(node):
            continue
        if should_exclude_node(node):
            continue
        if is_meaningful_text(str(node)):
            yield node


def scan_translation_coverage(root=None, document=None) -> ScanResult:
    """번역 키가 없는 텍스트 노드 검사"""
    if root is None:
        if document is None:
            raise ValueError('root 또는 document가 필요합니다.')
        root = default_root(document)

    result = ScanResult()
    for text_node in list(iter_text_nodes(root)):
        element = parent_element(text_node)
        if element is None:
            continue

        result.total_text_nodes += 1
        if has_translation_key(element):
            result.translated_nodes += 1
        else:
            result.missing_keys.append(MissingTranslationKey(
                element=element,
                text=str(text_node).strip(),
                xpath=get_element_xpath(element),
                parent_tag=tag_name(element),
                class_name=class_name(element),
            ))

    if result.total_text_nodes > 0:
        result.coverage_percentage = _round_half_up(result.translated_nodes / result.total_text_nodes * 100)
    else:
        result.coverage_percentage = 100
    return result


def _round_half_up(value):
    # .5는 올림
    return int(value + 0.5)


def log_missing_keys(scan_result):
    if not scan_result.missing_keys:
        logger.info('Translation Coverage: 100%')
        return

    logger.warning(
        f'Translation Coverage: {scan_result.coverage_percentage}% - '
        f'{TRANSLATION_KEY_ATTR} 속성이 없는 텍스트 노드 {len(scan_result.missing_keys)}개'
    )
    for index, missing in enumerate(scan_result.missing_keys, 1):
        logger.warning(f'{index}. "{missing.text}" <{missing.parent_tag} class="{missing.class_name}"> {missing.xpath}')
