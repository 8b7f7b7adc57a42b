from .base import *  # noqa

DEBUG = False

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = int(os.getenv('SECURE_HSTS_SECONDS', '0'))  # enable once TLS terminates upstream
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = False
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# CORS: restrict to production frontend domains
CORS_ALLOWED_ORIGINS = [o for o in os.getenv('CORS_ALLOWED_ORIGINS', '').split(',') if o]

CORS_ALLOW_CREDENTIALS = os.getenv('CORS_ALLOW_CREDENTIALS', 'false').lower() == 'true'

# CSRF trusted origins for cookie-based interactions (schemes required, e.g., https://example.com)
CSRF_TRUSTED_ORIGINS = [o for o in os.getenv('CSRF_TRUSTED_ORIGINS', '').split(',') if o]

# Allowed hosts must be set via env
ALLOWED_HOSTS = [h for h in os.getenv('ALLOWED_HOSTS', '').split(',') if h]


# ==============================================================================
# CELERY (production)
# ==============================================================================

# Indexing tasks carry only ids, so a redelivered task simply reindexes
CELERY_TASK_ACKS_LATE = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True
CELERY_WORKER_PREFETCH_MULTIPLIER = 1

CELERY_BROKER_CONNECTION_RETRY_ON_STARTUP = True
CELERY_BROKER_CONNECTION_MAX_RETRIES = int(os.getenv('CELERY_BROKER_CONNECTION_MAX_RETRIES', '10'))
CELERY_BROKER_TRANSPORT_OPTIONS = {
    # Must exceed the hard task time limit, or unacked tasks are redelivered mid-run
    'visibility_timeout': int(os.getenv('CELERY_VISIBILITY_TIMEOUT', str(CELERY_TASK_TIME_LIMIT * 2))),
    'socket_timeout': 5,
    'socket_connect_timeout': 5,
}

# Nothing reads task return values
CELERY_TASK_IGNORE_RESULT = True
CELERY_RESULT_EXPIRES = int(os.getenv('CELERY_RESULT_EXPIRES', '86400'))
CELERY_RESULT_BACKEND_TRANSPORT_OPTIONS = {
    'retry_policy': {'timeout': 5.0},
}

# Database connections are reused and health-checked between requests
DATABASES['default']['CONN_HEALTH_CHECKS'] = True
