"""
Service context for log lines.

Identifies the running process so interleaved logs from several workers stay traceable.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'drivent')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
