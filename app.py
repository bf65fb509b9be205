from flask import Flask, render_template_string, request, jsonify
import os

from dom_utils import parse_html
from editor_page import format_status_lines, validation_coverage
from translation_highlight import highlight_missing_keys
from translation_scanner import scan_translation_coverage, default_root
import translation_store
from translation_store import SUPPORTED_LANGUAGES, TRANSLATIONS_FILE

app = Flask(__name__)

DEFAULT_LANGUAGE = 'en'
LANGUAGE_NAMES = {
    'en': 'English',
    'hy': 'Հայերեն',
    'ru': 'Русский'
}

app.config['TRANSLATIONS_FILE'] = os.environ.get('TRANSLATIONS_FILE', TRANSLATIONS_FILE)
app.config['SUPPORTED_LANGUAGES'] = SUPPORTED_LANGUAGES


def translations_path():
    return app.config['TRANSLATIONS_FILE']


def resolve_language(param='lang'):
    language = (request.args.get(param) or '').strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        return DEFAULT_LANGUAGE
    return language


def make_translator(translations, language):
    """템플릿용 번역 조회 함수 (없으면 영어, 그래도 없으면 키 그대로)"""
    current = translations.get(language, {})
    fallback = translations.get(DEFAULT_LANGUAGE, {})

    def t(key):
        return current.get(key) or fallback.get(key) or key

    return t


def list_items(translations, prefix, fields):
    """features.items.0.title 형태의 목록 항목 번호"""
    keys = set(translations.get(DEFAULT_LANGUAGE, {}))
    count = 0
    while any(f'{prefix}.{count}.{field}' in keys for field in fields):
        count += 1
    return list(range(count))


def render_marketing_page(language):
    """data-i18n-key가 붙은 마케팅 페이지 HTML 생성"""
    translations = translation_store.load_translations(translations_path())
    return render_template_string(
        MARKETING_TEMPLATE,
        t=make_translator(translations, language),
        language=language,
        languages=LANGUAGE_NAMES,
        feature_items=list_items(translations, 'features.items', ('title', 'description')),
        faq_items=list_items(translations, 'faq.items', ('question', 'answer')),
    )


def scan_marketing_page(language):
    document = parse_html(render_marketing_page(language))
    return document, scan_translation_coverage(document=document)


@app.route('/')
def index():
    """마케팅 페이지"""
    return render_marketing_page(resolve_language())


@app.route('/translations')
def translations_editor():
    """번역 편집 페이지 (커버리지 스캔 결과와 검증 상태 표시)"""
    current_language = resolve_language()
    show_missing = request.args.get('missing') in {'1', 'true', 'yes'}

    document, scan_result = scan_marketing_page(current_language)
    if show_missing:
        highlight_missing_keys(document, scan_result)

    validation_status = translation_store.validate_translations(translations_path())
    live_page = default_root(document).decode_contents()

    return render_template_string(
        EDITOR_TEMPLATE,
        current_language=current_language,
        languages=LANGUAGE_NAMES,
        scan_result=scan_result,
        show_missing=show_missing,
        validation_status=validation_status,
        coverage=validation_coverage(validation_status),
        status_lines=format_status_lines(scan_result, validation_status),
        live_page=live_page,
        head_styles=''.join(str(style) for style in document.find_all('style')),
    )


# 번역 API

@app.route('/api/translations', methods=['GET'])
def get_translations():
    """모든 언어의 번역 조회 (오류가 나도 빈 구조를 반환)"""
    try:
        grouped = translation_store.get_all_translations(translations_path())
        app.logger.info(f'번역 로드: {sum(len(translation_store.flatten_object(tree)) for tree in grouped.values())}개')
        return jsonify(grouped)
    except Exception as e:
        app.logger.error(f'번역 조회 오류: {e}', exc_info=True)
        return jsonify(translation_store.empty_structure()), 200


@app.route('/api/translations/flat/all', methods=['GET'])
def get_flat_translations():
    try:
        return jsonify(translation_store.get_flat_translations(translations_path()))
    except Exception as e:
        app.logger.error(f'평탄 번역 조회 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to get flat translations'}), 500


@app.route('/api/translations/validate', methods=['GET'])
def validate_translations():
    """언어별 누락 키, 빈 값 검사"""
    try:
        return jsonify(translation_store.validate_translations(translations_path()))
    except Exception as e:
        app.logger.error(f'번역 검증 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to validate translations'}), 500


@app.route('/api/translations/coverage', methods=['GET'])
def translation_coverage():
    """렌더링된 마케팅 페이지의 DOM 커버리지"""
    language = resolve_language('language')
    try:
        _, scan_result = scan_marketing_page(language)
        data = scan_result.to_dict()
        data['language'] = language
        return jsonify(data)
    except Exception as e:
        app.logger.error(f'커버리지 스캔 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to scan translation coverage'}), 500


@app.route('/api/translations/<language>', methods=['GET'])
def get_language_translations(language):
    if language not in SUPPORTED_LANGUAGES:
        return jsonify({'success': False, 'message': f'Unknown language: {language}'}), 404
    try:
        return jsonify(translation_store.get_language_translations(language, translations_path()))
    except Exception as e:
        app.logger.error(f'언어별 번역 조회 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to get translations'}), 500


@app.route('/api/translations', methods=['PUT'])
def update_translation():
    """번역 키 하나 수정 (마지막 쓰기가 이김)"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'message': 'JSON body is required'}), 400

    language = data.get('language')
    key = data.get('key')
    value = data.get('value')

    try:
        translations = translation_store.update_translation(language, key, value, translations_path())
    except ValueError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except Exception as e:
        app.logger.error(f'번역 수정 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to update translation'}), 500

    app.logger.info(f'번역 수정 완료: {language}.{key}')
    return jsonify({
        'success': True,
        'message': 'Translation updated',
        'translations': translations
    })


@app.route('/api/translations/bulk', methods=['POST'])
def bulk_update_translations():
    data = request.get_json(silent=True) or {}
    language = data.get('language')
    updates = data.get('updates') or {}

    if language not in SUPPORTED_LANGUAGES:
        return jsonify({'success': False, 'message': 'Invalid language'}), 400

    try:
        translations = translation_store.bulk_update_translations(language, updates, translations_path())
    except ValueError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except Exception as e:
        app.logger.error(f'번역 일괄 수정 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to bulk update translations'}), 500

    return jsonify({
        'success': True,
        'message': 'Translations updated',
        'translations': translations
    })


@app.route('/api/translations/reset', methods=['POST'])
def reset_translations():
    """모든 번역을 기본값으로 초기화"""
    try:
        translations = translation_store.reset_translations(translations_path())
    except Exception as e:
        app.logger.error(f'번역 초기화 오류: {e}', exc_info=True)
        return jsonify({'success': False, 'message': 'Failed to reset translations'}), 500

    return jsonify({
        'success': True,
        'message': 'Translations reset to defaults',
        'translations': translations
    })


MARKETING_TEMPLATE = '''
<!DOCTYPE html>
<html lang="{{ language }}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ t('hero.title') }}</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: 'Noto Sans Armenian', 'Noto Sans', sans-serif; color: #2d3748; background: #fffaf5; }
        nav { display: flex; gap: 20px; justify-content: center; padding: 18px; background: white; box-shadow: 0 2px 8px rgba(0,0,0,0.06); }
        nav a { color: #4a5568; text-decoration: none; font-weight: 600; }
        .hero { text-align: center; padding: 80px 20px; background: linear-gradient(135deg, #fdf2f8, #fff7ed); }
        .hero h1 { font-size: 40px; margin-bottom: 16px; }
        .hero p { font-size: 18px; color: #718096; margin-bottom: 28px; }
        .btn { display: inline-block; padding: 12px 24px; border-radius: 8px; border: none; font-size: 15px; font-weight: 600; cursor: pointer; margin: 0 6px; }
        .btn-primary { background: #d53f8c; color: white; }
        .btn-outline { background: white; color: #d53f8c; border: 1px solid #d53f8c; }
        section { max-width: 960px; margin: 0 auto; padding: 60px 20px; }
        section h2 { font-size: 28px; text-align: center; margin-bottom: 10px; }
        section > p { text-align: center; color: #718096; margin-bottom: 30px; }
        .features-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 20px; }
        .feature-card { background: white; padding: 24px; border-radius: 12px; box-shadow: 0 4px 16px rgba(0,0,0,0.06); }
        .feature-card h3 { margin-bottom: 8px; }
        .faq-item { background: white; padding: 20px; border-radius: 10px; margin-bottom: 12px; }
        .faq-item h3 { font-size: 17px; margin-bottom: 6px; }
        footer { text-align: center; padding: 30px; color: #a0aec0; font-size: 13px; }
    </style>
</head>
<body>
    <nav>
        <a href="#home" data-i18n-key="navigation.home">{{ t('navigation.home') }}</a>
        <a href="#features" data-i18n-key="navigation.features">{{ t('navigation.features') }}</a>
        <a href="#templates" data-i18n-key="navigation.templates">{{ t('navigation.templates') }}</a>
        <a href="#pricing" data-i18n-key="navigation.pricing">{{ t('navigation.pricing') }}</a>
        <a href="#contact" data-i18n-key="navigation.contact">{{ t('navigation.contact') }}</a>
    </nav>

    <header class="hero" id="home">
        <h1 data-i18n-key="hero.title">{{ t('hero.title') }}</h1>
        <p data-i18n-key="hero.subtitle">{{ t('hero.subtitle') }}</p>
        <button class="btn btn-primary" data-i18n-key="hero.cta">{{ t('hero.cta') }}</button>
        <a class="btn btn-outline" href="#templates" data-i18n-key="hero.viewTemplates">{{ t('hero.viewTemplates') }}</a>
    </header>

    <section id="features">
        <h2 data-i18n-key="features.title">{{ t('features.title') }}</h2>
        <p data-i18n-key="features.subtitle">{{ t('features.subtitle') }}</p>
        <div class="features-grid">
            {% for i in feature_items %}
            <div class="feature-card">
                <span class="emoji" aria-hidden="true">💍</span>
                <h3 data-i18n-key="features.items.{{ i }}.title">{{ t('features.items.%d.title' % i) }}</h3>
                <p data-i18n-key="features.items.{{ i }}.description">{{ t('features.items.%d.description' % i) }}</p>
            </div>
            {% endfor %}
        </div>
    </section>

    <section id="templates">
        <h2 data-i18n-key="templates.title">{{ t('templates.title') }}</h2>
        <p data-i18n-key="templates.subtitle">{{ t('templates.subtitle') }}</p>
        <div style="text-align: center;">
            <a class="btn btn-outline" href="#templates" data-i18n-key="templates.viewTemplate">{{ t('templates.viewTemplate') }}</a>
        </div>
    </section>

    <section id="pricing">
        <h2 data-i18n-key="faq.title">{{ t('faq.title') }}</h2>
        {% for i in faq_items %}
        <div class="faq-item">
            <h3 data-i18n-key="faq.items.{{ i }}.question">{{ t('faq.items.%d.question' % i) }}</h3>
            <p data-i18n-key="faq.items.{{ i }}.answer">{{ t('faq.items.%d.answer' % i) }}</p>
        </div>
        {% endfor %}
    </section>

    <section id="contact">
        <h2 data-i18n-key="contact.title">{{ t('contact.title') }}</h2>
        <p data-i18n-key="contact.subtitle">{{ t('contact.subtitle') }}</p>
        <div style="text-align: center;">
            <button class="btn btn-primary" data-i18n-key="contact.cta">{{ t('contact.cta') }}</button>
        </div>
    </section>

    <footer>
        <span>© 2025</span>
        <span data-i18n-key="common.currency">{{ t('common.currency') }}</span>
    </footer>
</body>
</html>
'''

# 번역 편집 페이지 HTML 템플릿
EDITOR_TEMPLATE = '''
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>번역 편집기</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: 'Malgun Gothic', sans-serif; background: #f7fafc; }
        .editor-header { position: sticky; top: 0; z-index: 90; background: white; border-bottom: 1px solid #e2e8f0; box-shadow: 0 2px 8px rgba(0,0,0,0.08); padding: 12px 16px; }
        .editor-header h1 { font-size: 20px; color: #2d3748; }
        .editor-header .meta { font-size: 12px; color: #718096; margin-top: 2px; }
        .controls { display: flex; gap: 8px; flex-wrap: wrap; margin-top: 10px; align-items: center; }
        .controls a, .controls button { padding: 6px 12px; border-radius: 6px; border: 1px solid #cbd5e0; background: white; color: #2d3748; font-size: 13px; text-decoration: none; cursor: pointer; }
        .controls .active { background: #3182ce; color: white; border-color: #3182ce; }
        .controls .danger { background: #e53e3e; color: white; border-color: #e53e3e; }
        .status { margin-top: 8px; font-size: 13px; }
        .status-ok { color: #2f855a; }
        .status-warn { color: #c05621; }
        .live-page { outline: 4px solid rgba(66, 153, 225, 0.3); outline-offset: -4px; }
    </style>
    {{ head_styles | safe }}
</head>
<body>
    <div class="editor-header">
        <h1>번역 편집기</h1>
        <p class="meta">
            <span id="total-keys">{{ validation_status.totalKeys }}</span>개 키 •
            <span id="coverage">{{ coverage }}</span>% 커버리지
        </p>
        <div class="controls">
            {% for code, name in languages.items() %}
            <a href="?lang={{ code }}{% if show_missing %}&missing=1{% endif %}" class="{{ 'active' if code == current_language else '' }}">
                {{ name }}{% if validation_status.missing[code] %} ({{ validation_status.missing[code] | length }} 누락){% endif %}
            </a>
            {% endfor %}
            <a href="?lang={{ current_language }}{% if not show_missing %}&missing=1{% endif %}" class="{{ 'danger' if scan_result.missing_keys else '' }}">
                {% if scan_result.missing_keys %}{{ scan_result.missing_keys | length }} Missing{% else %}All Covered{% endif %}
            </a>
            <button type="button" class="danger" onclick="resetTranslations()">초기화</button>
        </div>
        {% for line in status_lines %}
        <p class="status {{ 'status-ok' if '✓' in line else 'status-warn' }}">{{ line }}</p>
        {% endfor %}
    </div>

    <div class="live-page">
        {{ live_page | safe }}
    </div>

    <script>
        function resetTranslations() {
            if (!confirm('모든 번역을 기본값으로 되돌릴까요? 되돌릴 수 없습니다.')) {
                return;
            }
            fetch('/api/translations/reset', { method: 'POST' })
                .then(function (response) {
                    if (!response.ok) { throw new Error('reset failed'); }
                    window.location.reload();
                })
                .catch(function () { alert('번역 초기화에 실패했습니다.'); });
        }

        setInterval(function () {
            fetch('/api/translations/validate')
                .then(function (response) { return response.json(); })
                .then(function (status) {
                    document.getElementById('total-keys').textContent = status.totalKeys;
                })
                .catch(function () {});
        }, 5000);
    </script>
</body>
</html>
'''


if __name__ == '__main__':
    import socket

    # 현재 컴퓨터의 IP 주소 가져오기
    def get_local_ip():
        try:
            s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            s.connect(("8.8.8.8", 80))
            ip = s.getsockname()[0]
            s.close()
            return ip
        except OSError:
            return "localhost"

    local_ip = get_local_ip()
    translation_store.initialize_translations(translations_path())

    print("🎉 웨딩 사이트 번역 서버를 시작합니다!")
    print("=" * 50)
    print(f"   마케팅 페이지: http://localhost:8007")
    print(f"   번역 편집기: http://localhost:8007/translations")
    print(f"   외부 접속: http://{local_ip}:8007")
    print("=" * 50)
    print("⏹️  종료하려면 Ctrl+C를 누르세요")

    app.run(debug=True, host='0.0.0.0', port=8007)
