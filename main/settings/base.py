"""
Django settings for main project.
"""

import os

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'changeme')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ['127.0.0.1', 'localhost', '0.0.0.0']

# Application definition
INSTALLED_APPS = [
    'paygate.apps.PaygateConfig',
]

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

USE_TZ = True

# mail

DEFAULT_FROM_EMAIL = 'noreply@paygate.local'

ADMINS = []

# payment gateways

PAYPAL_URL = 'https://www.paypal.com/cgi-bin/webscr'
PAYPAL_SANDBOX_URL = 'https://www.sandbox.paypal.com/cgi-bin/webscr'

REDSYS_URL = 'https://sis.redsys.es/sis/realizarPago'
REDSYS_SANDBOX_URL = 'https://sis-t.redsys.es:25443/sis/realizarPago'

# Seconds to wait for the PayPal notification validation
PAYMENT_GATEWAY_TIMEOUT = 30

# Seconds to remember processed transaction ids (None: until evicted)
PAYGATE_TXN_TIMEOUT = None

# Send mail to ADMINS when a notification looks forged
PAYGATE_NOTIFY_ADMINS = True

# Logging configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {module} {funcName} {lineno} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {name} {funcName}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'paygate': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
