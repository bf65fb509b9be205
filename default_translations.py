# 초기 번역 데이터 (en / hy / ru)
# 번역 저장소가 비어 있거나 초기화(reset)될 때 이 값으로 채워집니다.

EN = {
    'navigation': {
        'home': 'Home',
        'features': 'Features',
        'templates': 'Templates',
        'pricing': 'Pricing',
        'contact': 'Contact'
    },
    'hero': {
        'title': 'Create Your Perfect Wedding Website',
        'subtitle': 'Beautiful, customizable wedding invitation websites that capture your love story',
        'cta': 'Get Started Today',
        'viewTemplates': 'View All Templates'
    },
    'features': {
        'title': 'Everything You Need for Your Wedding Website',
        'subtitle': 'Professional features to make your special day unforgettable',
        'items': [
            {
                'title': 'Beautiful Templates',
                'description': 'Choose from stunning, professionally designed templates'
            },
            {
                'title': 'RSVP Management',
                'description': 'Easily collect and manage guest responses with our built-in RSVP system'
            },
            {
                'title': 'Photo Galleries',
                'description': 'Upload and display beautiful wedding photos with secure storage'
            }
        ]
    },
    'templates': {
        'title': 'Beautiful Wedding Templates',
        'subtitle': 'Choose from our collection of stunning, professionally designed templates',
        'viewTemplate': 'View Template'
    },
    'faq': {
        'title': 'Frequently Asked Questions',
        'items': [
            {
                'question': 'Can I customize my template?',
                'answer': 'Absolutely! All templates are fully customizable. You can change colors, fonts, content, photos, and layout elements to match your wedding style.'
            },
            {
                'question': 'How do I manage RSVPs?',
                'answer': 'All plans include RSVP functionality where guests can confirm attendance and meal preferences.'
            }
        ]
    },
    'contact': {
        'title': 'Ready to Create Your Wedding Website?',
        'subtitle': 'Get started today and create a beautiful website for your special day',
        'cta': 'Start Building Now'
    },
    'common': {
        'currency': 'AMD',
        'learnMore': 'Learn More',
        'getStarted': 'Get Started'
    }
}

HY = {
    'navigation': {
        'home': 'Գլխավոր',
        'features': 'Հնարավորություններ',
        'templates': 'Ձևանմուշներ',
        'pricing': 'Գներ',
        'contact': 'Կապ'
    },
    'hero': {
        'title': 'Ստեղծեք ձեր կատարյալ հարսանեկան կայքը',
        'subtitle': 'Գեղեցիկ և անհատականացվող հարսանեկան հրավիրատոմսերի կայքեր, որոնք պատմում են ձեր սիրո պատմությունը',
        'cta': 'Սկսել այսօր',
        'viewTemplates': 'Դիտել բոլոր ձևանմուշները'
    },
    'features': {
        'title': 'Այն ամենը, ինչ անհրաժեշտ է ձեր հարսանեկան կայքի համար',
        'subtitle': 'Մասնագիտական հնարավորություններ ձեր հատուկ օրը անմոռանալի դարձնելու համար',
        'items': [
            {
                'title': 'Գեղեցիկ ձևանմուշներ',
                'description': 'Ընտրեք մասնագիտորեն մշակված հիասքանչ ձևանմուշներից'
            },
            {
                'title': 'Հյուրերի պատասխանների կառավարում',
                'description': 'Հեշտությամբ հավաքեք և կառավարեք հյուրերի պատասխանները'
            },
            {
                'title': 'Լուսանկարների պատկերասրահ',
                'description': 'Վերբեռնեք և ցուցադրեք հարսանեկան լուսանկարները ապահով պահեստով'
            }
        ]
    },
    'templates': {
        'title': 'Գեղեցիկ հարսանեկան ձևանմուշներ',
        'subtitle': 'Ընտրեք մեր մասնագիտորեն մշակված ձևանմուշների հավաքածուից',
        'viewTemplate': 'Դիտել ձևանմուշը'
    },
    'faq': {
        'title': 'Հաճախ տրվող հարցեր',
        'items': [
            {
                'question': 'Կարո՞ղ եմ անհատականացնել ձևանմուշը',
                'answer': 'Իհարկե։ Բոլոր ձևանմուշները լիովին անհատականացվող են։ Կարող եք փոխել գույները, տառատեսակները, բովանդակությունը և լուսանկարները։'
            },
            {
                'question': 'Ինչպե՞ս կառավարել հյուրերի պատասխանները',
                'answer': 'Բոլոր փաթեթները ներառում են հյուրերի պատասխանների համակարգ, որտեղ հյուրերը կարող են հաստատել իրենց մասնակցությունը։'
            }
        ]
    },
    'contact': {
        'title': 'Պատրա՞ստ եք ստեղծել ձեր հարսանեկան կայքը',
        'subtitle': 'Սկսեք այսօր և ստեղծեք գեղեցիկ կայք ձեր հատուկ օրվա համար',
        'cta': 'Սկսել ստեղծումը'
    },
    'common': {
        'currency': 'AMD',
        'learnMore': 'Իմանալ ավելին',
        'getStarted': 'Սկսել'
    }
}

RU = {
    'navigation': {
        'home': 'Главная',
        'features': 'Возможности',
        'templates': 'Шаблоны',
        'pricing': 'Цены',
        'contact': 'Контакты'
    },
    'hero': {
        'title': 'Создайте идеальный свадебный сайт',
        'subtitle': 'Красивые настраиваемые сайты-приглашения, которые расскажут историю вашей любви',
        'cta': 'Начать сегодня',
        'viewTemplates': 'Все шаблоны'
    },
    'features': {
        'title': 'Всё необходимое для вашего свадебного сайта',
        'subtitle': 'Профессиональные функции, чтобы ваш особенный день стал незабываемым',
        'items': [
            {
                'title': 'Красивые шаблоны',
                'description': 'Выбирайте из потрясающих профессионально разработанных шаблонов'
            },
            {
                'title': 'Управление ответами гостей',
                'description': 'Легко собирайте ответы гостей с помощью встроенной системы RSVP'
            },
            {
                'title': 'Фотогалереи',
                'description': 'Загружайте и показывайте свадебные фотографии с надёжным хранением'
            }
        ]
    },
    'templates': {
        'title': 'Красивые свадебные шаблоны',
        'subtitle': 'Выберите шаблон из нашей коллекции профессиональных дизайнов',
        'viewTemplate': 'Смотреть шаблон'
    },
    'faq': {
        'title': 'Часто задаваемые вопросы',
        'items': [
            {
                'question': 'Можно ли настроить шаблон?',
                'answer': 'Конечно! Все шаблоны полностью настраиваются. Вы можете менять цвета, шрифты, тексты и фотографии.'
            },
            {
                'question': 'Как управлять ответами гостей?',
                'answer': 'Все тарифы включают систему RSVP, где гости могут подтвердить своё присутствие.'
            }
        ]
    },
    'contact': {
        'title': 'Готовы создать свадебный сайт?',
        'subtitle': 'Начните сегодня и создайте красивый сайт для вашего особенного дня',
        'cta': 'Начать создание'
    },
    'common': {
        'currency': 'AMD',
        'learnMore': 'Подробнее',
        'getStarted': 'Начать'
    }
}

DEFAULT_TRANSLATIONS = {
    'en': EN,
    'hy': HY,
    'ru': RU
}
