from dom_utils import add_class, class_list, new_element, remove_class

HIGHLIGHT_CLASS = 'translation-missing-highlight'
HIGHLIGHT_STYLE_ID = 'translation-highlight-styles'

HIGHLIGHT_CSS = '''
.translation-missing-highlight {
  outline: 2px dashed #ef4444 !important;
  background-color: rgba(239, 68, 68, 0.1) !important;
  position: relative !important;
}

.translation-missing-highlight::before {
  content: "\\26A0";
  position: absolute;
  top: -8px;
  left: -8px;
  background: #ef4444;
  color: white;
  border-radius: 50%;
  width: 20px;
  height: 20px;
  display: flex;
  align-items: center;
  justify-content: center;
  font-size: 12px;
  font-weight: bold;
  z-index: 10000;
  box-shadow: 0 2px 4px rgba(0,0,0,0.2);
}
'''


def _highlighted_elements(document):
    return [el for el in document.find_all(class_=True) if HIGHLIGHT_CLASS in class_list(el)]


def ensure_highlight_styles(document):
    """강조 스타일 블록을 한 번만 삽입"""
    if document.find(id=HIGHLIGHT_STYLE_ID) is not None:
        return False

    style = new_element(document, 'style', text=HIGHLIGHT_CSS, id=HIGHLIGHT_STYLE_ID)
    head = document.head
    if head is None:
        head = new_element(document, 'head')
        html = document.html
        if html is not None:
            html.insert(0, head)
        else:
            document.insert(0, head)
    head.append(style)
    return True


def highlight_missing_keys(document, scan_result):
    """번역 키가 없는 요소를 화면에 표시"""
    for element in _highlighted_elements(document):
        remove_class(element, HIGHLIGHT_CLASS)

    for missing in scan_result.missing_keys:
        add_class(missing.element, HIGHLIGHT_CLASS)
        missing.element['title'] = f'Missing translation key: "{missing.text}"'

    ensure_highlight_styles(document)


def clear_highlights(document):
    """표시 제거 (표시된 요소가 없으면 아무 작업도 하지 않음)"""
    for element in _highlighted_elements(document):
        remove_class(element, HIGHLIGHT_CLASS)
        if element.has_attr('title'):
            del element['title']
