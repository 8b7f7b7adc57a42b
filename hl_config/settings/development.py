from .base import *  # noqa

DEBUG = True

# Dev CORS
CORS_ALLOW_ALL_ORIGINS = True

# Run background indexing inline when no broker is available locally
CELERY_TASK_ALWAYS_EAGER = bool(int(os.getenv('CELERY_TASK_ALWAYS_EAGER', '0')))
